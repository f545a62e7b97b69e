import os

import pandas as pd

from error_exception.customerror import InvalidInputError
from myfloat import parse_float32
from msg_log.mylog import get_logger

PROJECT_ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
logger = get_logger(__name__, filename=os.path.join(PROJECT_ROOT_PATH, 'log', 'csv_handler.log'))


def make_sure_path_exists(path):
    """
    判断路径是否存在，不存在则创建
    :param path: 文件夹路径
    :return:
    """
    if path:
        os.makedirs(path, exist_ok=True)


class CSVReader:
    """从csv文件中读取待拆分的数值"""

    def __init__(self, value_column: str = 'value'):
        self.value_column = value_column

    def read_values(self, file_path: str) -> list:
        """
        读取数值列，无法解析为float32的行记录日志后丢弃
        :param file_path: csv文件路径
        :return: float32精度的数值列表
        """
        try:
            data = pd.read_csv(file_path, encoding='utf-8', dtype='str', keep_default_na=False)
        except FileNotFoundError:
            logger.warning(f'{file_path}文件不存在')
            return []
        except pd.errors.EmptyDataError:
            logger.warning(f'{file_path}文件为空')
            raise InvalidInputError(f'{file_path}文件为空')
        if self.value_column not in data.columns:
            logger.warning(f'{file_path}中不存在{self.value_column}列')
            raise InvalidInputError(f'{file_path}中不存在{self.value_column}列')

        values = []
        for row_number, text in enumerate(data[self.value_column].str.strip(), start=2):
            try:
                values.append(parse_float32(text))
            except InvalidInputError as e:
                logger.warning(f'{file_path}第{row_number}行数据无效: {e}')
                continue
        return values


class CSVWriter:
    """向csv中写入拆分结果"""

    @staticmethod
    def write_table(table: pd.DataFrame, file_path: str):
        """写入拆分表，目录不存在时自动创建，已存在的文件会被覆盖"""
        make_sure_path_exists(os.path.dirname(file_path))
        table.to_csv(file_path, index=False, encoding='utf-8')
        logger.info(f'写入{len(table)}条拆分结果到{file_path}')
