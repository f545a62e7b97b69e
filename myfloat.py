import math
import os
import struct
from typing import NamedTuple

import numpy as np

from error_exception.customerror import InvalidInputError
from msg_log.mylog import get_logger

PROJECT_ROOT_PATH = os.path.dirname(os.path.abspath(__file__))
logger = get_logger(__name__, filename=os.path.join(PROJECT_ROOT_PATH, 'log', 'myfloat.log'))

SIGN_WIDTH = 1
EXPONENT_WIDTH = 8
MANTISSA_WIDTH = 23

SIGN_SHIFT = 31
EXPONENT_SHIFT = 23
EXPONENT_MASK = 0xFF
MANTISSA_MASK = 0x7FFFFF
MAX_BITS = 0xFFFFFFFF


class FloatBits(NamedTuple):
    """
    32位单精度浮点数的位分解结果
    sign: 符号位 0 或 1
    exponent: 8位指数 0-255
    mantissa: 23位尾数 0-8388607
    """
    sign: int
    exponent: int
    mantissa: int

    @classmethod
    def from_bits(cls, bits: int):
        """从原始32位整数拆出三个字段"""
        if not 0 <= bits <= MAX_BITS:
            raise InvalidInputError(f"位模式{bits:#x}超出32位范围")
        return cls(sign=(bits >> SIGN_SHIFT) & 1,
                   exponent=(bits >> EXPONENT_SHIFT) & EXPONENT_MASK,
                   mantissa=bits & MANTISSA_MASK)

    def to_bits(self) -> int:
        """重新拼回原始32位整数"""
        return self.sign << SIGN_SHIFT | self.exponent << EXPONENT_SHIFT | self.mantissa

    def to_float(self) -> float:
        """把位模式按float32重新解释为数值"""
        return struct.unpack('>f', struct.pack('>I', self.to_bits()))[0]

    def to_binary_strings(self):
        """返回定宽的二进制字符串 (1, 8, 23)"""
        return (f"{self.sign:0{SIGN_WIDTH}b}",
                f"{self.exponent:0{EXPONENT_WIDTH}b}",
                f"{self.mantissa:0{MANTISSA_WIDTH}b}")


def float_to_bits(value: float) -> int:
    """
    将浮点数按IEEE 754单精度打包成4个字节，再把这4个字节解释为无符号32位整数
    注意这里不是数值转换，int(1.1) 得到的是 1
    """
    try:
        return struct.unpack('>I', struct.pack('>f', value))[0]
    except OverflowError:
        raise InvalidInputError(f"{value}超出32位浮点数的表示范围")
    except struct.error:
        raise InvalidInputError(f"{value!r}不是浮点数")


def to_float32(value: float) -> float:
    """把数值舍入到float32精度"""
    return struct.unpack('>f', struct.pack('>f', value))[0]


def decompose(value: float) -> FloatBits:
    """拆分一个float32的符号、指数、尾数"""
    bits = float_to_bits(value)
    float_bits = FloatBits.from_bits(bits)
    logger.info(f"{value!r} -> {bits:#010x} {float_bits}")
    return float_bits


def to_float32_array(values):
    """
    批量转换为float32数组
    超出float32范围的有限值、无法转换为浮点数的值都抛出InvalidInputError
    :param values: 可迭代的数值、字符串或ndarray
    """
    try:
        source = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"存在无法转换为浮点数的值: {e}")
    with np.errstate(over='ignore'):
        floats = source.astype(np.float32)
    # inf/nan 本身就是合法的float32，只有原本有限的值变成inf才算溢出
    if np.any(np.isinf(floats) & np.isfinite(source)):
        raise InvalidInputError("存在超出32位浮点数表示范围的数值")
    return floats


def decompose_array(values):
    """
    批量拆分，返回 (sign, exponent, mantissa) 三个numpy数组
    :param values: 可迭代的数值或ndarray
    """
    bits = to_float32_array(values).view(np.uint32)
    sign = (bits >> SIGN_SHIFT) & 1
    exponent = (bits >> EXPONENT_SHIFT) & EXPONENT_MASK
    mantissa = bits & MANTISSA_MASK
    return sign, exponent, mantissa


def parse_float32(text) -> float:
    """
    将输入解析为float32精度的数值
    先解析为float64再舍入到float32，属于两次舍入。
    十进制串恰好落在两个float32中点附近时，结果可能与直接解析为float32
    (即C++的 1.1f 字面量)相差一个ULP；常见输入如1.1不受影响。
    :param text: 字符串或数值
    :return: 舍入到float32后的数值
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        logger.warning(f"无法解析的输入: {text!r}")
        raise InvalidInputError(f"无法将{text!r}解析为32位浮点数")
    # inf/nan 本身就是合法的float32
    if math.isfinite(value):
        float_to_bits(value)
    return to_float32(value)


def parse_bits(text) -> int:
    """
    解析原始位模式，支持 0x/0b/0o 前缀和十进制
    """
    try:
        bits = int(text, 0) if isinstance(text, str) else int(text)
    except (TypeError, ValueError):
        logger.warning(f"无法解析的位模式: {text!r}")
        raise InvalidInputError(f"无法将{text!r}解析为32位位模式")
    if not 0 <= bits <= MAX_BITS:
        raise InvalidInputError(f"位模式{text}超出32位范围")
    return bits


if __name__ == "__main__":
    bits = float_to_bits(3.141592653589793)
    print(bits)
    print(format(bits, '032b'))
    print(decompose(1.1))
