import unittest

from bit_format.table_formatter import (FIELD_COLUMNS, field_padding, format_fields, format_input,
                                        format_per_bit, per_bit_padding, render)
from myfloat import FloatBits, decompose, parse_float32


class FieldModeTest(unittest.TestCase):
    def test_reference_output(self):
        value = parse_float32('1.1')
        expected = ("Input: 1.1\n"
                    "| + | exponent |        mantissa         |\n"
                    "| 0 | 01111111 | 00011001100110011001101 |")
        self.assertEqual(expected, render(value, decompose(value), 'field'))

    def test_negative_one(self):
        expected = ("| + | exponent |        mantissa         |\n"
                    "| 1 | 01111111 | 00000000000000000000000 |")
        self.assertEqual(expected, format_fields(decompose(-1.0)))

    def test_three_columns_with_field_widths(self):
        header, row = format_fields(decompose(3.75)).split('\n')
        self.assertEqual(len(header), len(row))
        cells = row.strip('|').split('|')
        self.assertEqual(3, len(cells))
        self.assertEqual([1, 8, 23], [len(cell.strip()) for cell in cells])
        self.assertEqual(['+', 'exponent', 'mantissa'], [cell.strip() for cell in header.strip('|').split('|')])


class PerBitModeTest(unittest.TestCase):
    def test_padding_sums_to_width(self):
        for title, bit_count in FIELD_COLUMNS:
            left, right = per_bit_padding(title, bit_count)
            self.assertEqual(3 * bit_count + (bit_count - 1) - len(title), left + right)
            self.assertIn(right - left, (0, 1))

    def test_known_padding(self):
        self.assertEqual((1, 1), per_bit_padding('+', 1))
        self.assertEqual((11, 12), per_bit_padding('exponent', 8))
        self.assertEqual((41, 42), per_bit_padding('mantissa', 23))
        self.assertEqual((8, 9), field_padding('mantissa', 23))

    def test_layout(self):
        header, row = format_per_bit(decompose(1.1)).split('\n')
        self.assertEqual(129, len(header))
        self.assertEqual(len(header), len(row))
        self.assertTrue(header.startswith('| + |' + ' ' * 11 + 'exponent' + ' ' * 12 + '|'))
        cells = row.strip('|').split('|')
        self.assertEqual(32, len(cells))
        self.assertEqual('00111111100011001100110011001101', ''.join(cell.strip() for cell in cells))

    def test_header_pipes_align_with_field_boundaries(self):
        header, row = format_per_bit(FloatBits(1, 255, 0)).split('\n')
        header_pipes = [i for i, ch in enumerate(header) if ch == '|']
        row_pipes = [i for i, ch in enumerate(row) if ch == '|']
        # 表头的竖线分别位于第0、1、9、32个单元格的边界
        self.assertEqual([row_pipes[i] for i in (0, 1, 9, 32)], header_pipes)


class RenderTest(unittest.TestCase):
    def test_echo_input(self):
        self.assertEqual('Input: -1', format_input(-1.0))
        self.assertEqual('Input: 1.1', format_input(parse_float32('1.1')))
        self.assertEqual('Input: inf', format_input(float('inf')))

    def test_per_bit_render(self):
        text = render(-1.0, decompose(-1.0), 'per_bit')
        lines = text.split('\n')
        self.assertEqual(3, len(lines))
        self.assertEqual('Input: -1', lines[0])
        self.assertTrue(lines[2].startswith('| 1 | 0 | 1 |'))

    def test_unknown_mode(self):
        with self.assertRaises(KeyError):
            render(1.0, decompose(1.0), 'hex')


if __name__ == '__main__':
    unittest.main()
