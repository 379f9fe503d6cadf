from sinklog.cli import app

app()
