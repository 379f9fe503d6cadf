"""Testes unitarios para a formatação de valores tipados."""

from __future__ import annotations

import struct
import unittest

from sinklog import InvalidLogValueError, LogValue, ValueKind, as_log_value, format_value
from sinklog.core.values import (
    log_bool,
    log_char,
    log_f32,
    log_f64,
    log_hex8,
    log_hex16,
    log_hex32,
    log_hex64,
    log_i8,
    log_i16,
    log_i32,
    log_i64,
    log_ptr,
    log_str,
    log_u8,
    log_u16,
    log_u32,
    log_u64,
)


class TestHexadecimal(unittest.TestCase):
    """Valores hex: minúsculos, prefixo 0x e largura fixa."""

    def test_hex32_deadbeef(self) -> None:
        self.assertEqual(format_value(log_hex32(0xDEADBEEF)), "0xdeadbeef")

    def test_hex16_decimal_4444(self) -> None:
        self.assertEqual(format_value(log_hex16(4444)), "0x115c")

    def test_zero_padding_por_largura(self) -> None:
        """Cada largura preenche com zeros até 2/4/8/16 dígitos."""

        self.assertEqual(format_value(log_hex8(0xA)), "0x0a")
        self.assertEqual(format_value(log_hex16(0xAB)), "0x00ab")
        self.assertEqual(format_value(log_hex32(1)), "0x00000001")
        self.assertEqual(format_value(log_hex64(0xCAFEBABEDEADC0DE)), "0xcafebabedeadc0de")
        self.assertEqual(format_value(log_hex64(0)), "0x" + "0" * 16)

    def test_hex_fora_do_intervalo(self) -> None:
        with self.assertRaises(InvalidLogValueError):
            log_hex8(0x100)
        with self.assertRaises(InvalidLogValueError):
            log_hex16(-1)


class TestInteiros(unittest.TestCase):
    """Inteiros com e sem sinal em base 10, validados por largura."""

    def test_limites_aceitos(self) -> None:
        self.assertEqual(format_value(log_i8(-128)), "-128")
        self.assertEqual(format_value(log_i16(32767)), "32767")
        self.assertEqual(format_value(log_i32(-32)), "-32")
        self.assertEqual(format_value(log_i64(-(2 ** 63))), str(-(2 ** 63)))
        self.assertEqual(format_value(log_u8(255)), "255")
        self.assertEqual(format_value(log_u16(16)), "16")
        self.assertEqual(format_value(log_u32(0xDEADBEEF)), "3735928559")
        self.assertEqual(format_value(log_u64(2 ** 64 - 1)), "18446744073709551615")

    def test_fora_do_intervalo(self) -> None:
        for constructor, value in (
            (log_i8, 128),
            (log_i16, -32769),
            (log_i32, 2 ** 31),
            (log_u8, -1),
            (log_u32, 2 ** 32),
            (log_u64, 2 ** 64),
        ):
            with self.subTest(constructor=constructor.__name__, value=value):
                with self.assertRaises(InvalidLogValueError):
                    constructor(value)

    def test_tipos_errados_sao_rejeitados(self) -> None:
        """Float em i32, string em f64 e bool em inteiro falham na construção."""

        with self.assertRaises(InvalidLogValueError):
            log_i32(3.14)
        with self.assertRaises(InvalidLogValueError):
            log_f64("Hello")
        with self.assertRaises(InvalidLogValueError):
            log_i32(True)

    def test_erro_tambem_e_value_error(self) -> None:
        with self.assertRaises(ValueError):
            log_u8(300)


class TestFloats(unittest.TestCase):
    """Convenção fixa de 6 casas decimais."""

    def test_f64_seis_casas(self) -> None:
        self.assertEqual(format_value(log_f64(2.718281828)), "2.718282")
        self.assertEqual(format_value(log_f64(3.1415926535)), "3.141593")
        self.assertEqual(format_value(log_f64(2)), "2.000000")

    def test_f32_reduz_precisao(self) -> None:
        self.assertEqual(format_value(log_f32(3.1415)), "3.141500")
        narrowed = struct.unpack("<f", struct.pack("<f", 0.1))[0]
        self.assertEqual(format_value(log_f32(0.1)), f"{narrowed:.6f}")

    def test_nao_finitos(self) -> None:
        self.assertEqual(format_value(log_f64(float("nan"))), "nan")
        self.assertEqual(format_value(log_f32(float("inf"))), "inf")
        self.assertEqual(format_value(log_f64(float("-inf"))), "-inf")

    def test_f32_fora_do_intervalo(self) -> None:
        with self.assertRaises(InvalidLogValueError):
            log_f32(1e39)


class TestOutrosTipos(unittest.TestCase):
    """String, bool, char e ponteiro."""

    def test_string_inalterada(self) -> None:
        self.assertEqual(format_value(log_str("  com espaços  ")), "  com espaços  ")

    def test_bool_literal(self) -> None:
        self.assertEqual(format_value(log_bool(True)), "true")
        self.assertEqual(format_value(log_bool(False)), "false")
        with self.assertRaises(InvalidLogValueError):
            log_bool(1)

    def test_char_unicode(self) -> None:
        self.assertEqual(format_value(log_char("X")), "X")
        self.assertEqual(format_value(log_char("✔")), "✔")
        with self.assertRaises(InvalidLogValueError):
            log_char("XY")
        with self.assertRaises(InvalidLogValueError):
            log_char("")

    def test_ponteiro_largura_da_plataforma(self) -> None:
        value = object()
        rendered = format_value(log_ptr(value))
        self.assertTrue(rendered.startswith("0x"))
        self.assertEqual(len(rendered), 2 + struct.calcsize("P") * 2)
        self.assertEqual(int(rendered, 16), id(value))
        self.assertEqual(rendered, rendered.lower())

    def test_str_de_log_value(self) -> None:
        self.assertEqual(str(log_hex8(0xAB)), "0xab")


class TestAsLogValue(unittest.TestCase):
    """Conversão de valores Python comuns."""

    def test_conversoes(self) -> None:
        self.assertEqual(as_log_value(True), LogValue(ValueKind.BOOL, True))
        self.assertEqual(as_log_value(-5).kind, ValueKind.INT64)
        self.assertEqual(as_log_value(2 ** 63).kind, ValueKind.UINT64)
        self.assertEqual(as_log_value(1.5).kind, ValueKind.FLOAT64)
        self.assertEqual(as_log_value("x").kind, ValueKind.STRING)
        self.assertEqual(format_value(as_log_value([1, 2])), "[1, 2]")

    def test_inteiro_enorme_vira_texto(self) -> None:
        value = as_log_value(2 ** 70)
        self.assertEqual(value.kind, ValueKind.STRING)
        self.assertEqual(format_value(value), str(2 ** 70))

    def test_log_value_existente_e_preservado(self) -> None:
        original = log_hex16(1)
        self.assertIs(as_log_value(original), original)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
