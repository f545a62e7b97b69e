import os

import numpy as np
import pandas as pd
from pandas import DataFrame

from myfloat import decompose_array, to_float32_array, SIGN_WIDTH, EXPONENT_WIDTH, MANTISSA_WIDTH
from msg_log.mylog import get_logger

PROJECT_ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
logger = get_logger(__name__, filename=os.path.join(PROJECT_ROOT_PATH, 'log', 'bits_table.log'))

TABLE_COLUMNS = ['value', 'bits', 'sign', 'exponent', 'mantissa']


class BitsTable:
    """批量拆分浮点数，结果整理为DataFrame，每行对应一个输入值"""

    def __init__(self, values):
        self.values = to_float32_array(values)
        self.table = None

    def build(self) -> DataFrame:
        """生成表格，字段列为定宽二进制串，bits列为8位十六进制"""
        if self.values.size == 0:
            logger.warning("没有需要拆分的数据")
            self.table = pd.DataFrame(columns=TABLE_COLUMNS)
            return self.table

        sign, exponent, mantissa = decompose_array(self.values)
        bits = self.values.view(np.uint32)
        self.table = pd.DataFrame({
            'value': [f"{value:g}" for value in self.values.tolist()],
            'bits': [f"{b:#010x}" for b in bits.tolist()],
            'sign': [f"{s:0{SIGN_WIDTH}b}" for s in sign.tolist()],
            'exponent': [f"{e:0{EXPONENT_WIDTH}b}" for e in exponent.tolist()],
            'mantissa': [f"{m:0{MANTISSA_WIDTH}b}" for m in mantissa.tolist()],
        }, columns=TABLE_COLUMNS)
        logger.info(f"拆分完成，共{len(self.table)}条")
        return self.table

    def raw_fields(self) -> DataFrame:
        """整数形式的字段，便于校验"""
        sign, exponent, mantissa = decompose_array(self.values)
        return pd.DataFrame({
            'bits': self.values.view(np.uint32).astype(np.int64),
            'sign': sign.astype(np.int64),
            'exponent': exponent.astype(np.int64),
            'mantissa': mantissa.astype(np.int64),
        })
