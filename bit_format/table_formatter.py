import os
from typing import Literal

from myfloat import FloatBits, SIGN_WIDTH, EXPONENT_WIDTH, MANTISSA_WIDTH
from msg_log.mylog import get_logger

PROJECT_ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
logger = get_logger(__name__, filename=os.path.join(PROJECT_ROOT_PATH, 'log', 'table_formatter.log'))

# (表头, 位数)，按高位到低位排列
FIELD_COLUMNS = [
    ('+', SIGN_WIDTH),
    ('exponent', EXPONENT_WIDTH),
    ('mantissa', MANTISSA_WIDTH),
]


def split_padding(width: int):
    """把总宽度拆成左右两段，左边取整除的一半"""
    left = width // 2
    return left, width - left


def per_bit_padding(title: str, bit_count: int):
    """
    逐位模式下表头两侧的填充
    每位占3个字符(含两侧空格)，相邻两位共用一个竖线，再减去表头长度
    """
    width = 3 * bit_count + (bit_count - 1) - len(title)
    return split_padding(width)


def field_padding(title: str, bit_count: int):
    """字段模式下表头两侧的填充，列宽为位数加两侧各一个空格"""
    return split_padding(bit_count + 2 - len(title))


def format_input(value: float) -> str:
    """回显输入，按 %g 输出六位有效数字"""
    return f"Input: {value:g}"


def _header_row(padding_func) -> str:
    cells = []
    for title, bit_count in FIELD_COLUMNS:
        left, right = padding_func(title, bit_count)
        cells.append(' ' * left + title + ' ' * right)
    return '|' + '|'.join(cells) + '|'


def format_fields(float_bits: FloatBits) -> str:
    """字段模式：三列分别是符号、指数、尾数的定宽二进制串"""
    cells = [f" {field} " for field in float_bits.to_binary_strings()]
    rows = [_header_row(field_padding), '|' + '|'.join(cells) + '|']
    return '\n'.join(rows)


def format_per_bit(float_bits: FloatBits) -> str:
    """逐位模式：32位从高到低每位一个单元格，表头居中在各自字段的位上"""
    bit_string = ''.join(float_bits.to_binary_strings())
    cells = [f" {bit} " for bit in bit_string]
    rows = [_header_row(per_bit_padding), '|' + '|'.join(cells) + '|']
    return '\n'.join(rows)


def render(value: float, float_bits: FloatBits, mode: Literal['field', 'per_bit'] = 'field') -> str:
    """输出完整的文本：输入回显 + 表格"""
    if mode == 'field':
        table = format_fields(float_bits)
    elif mode == 'per_bit':
        table = format_per_bit(float_bits)
    else:
        raise KeyError('mode参数只能是field或per_bit')
    logger.info(f"以{mode}模式输出 {value!r}")
    return format_input(value) + '\n' + table
