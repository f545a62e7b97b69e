from enum import Enum
import os
from xml.etree import ElementTree

from error_exception.customerror import ConfigError
from msg_log.mylog import get_logger

PROJECT_ROOT_PATH = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT_PATH, 'config.xml')
logger = get_logger(
    __name__, filename=os.path.join(PROJECT_ROOT_PATH, "log", "config.log")
)


class DisplayMode(Enum):
    FIELD = 'field'
    PER_BIT = 'per_bit'


class ConfigHandler:
    """配置文件读取类"""

    def __init__(self, file_path=DEFAULT_CONFIG_PATH):
        self.file_path = file_path
        self.last_modified_time = None
        self.config = None

    def load_config(self):
        try:
            tree = ElementTree.parse(self.file_path)
        except FileNotFoundError:
            logger.error(f"配置文件{self.file_path}不存在")
            raise ConfigError(f"配置文件{self.file_path}不存在")
        except ElementTree.ParseError as e:
            logger.error(f"配置文件{self.file_path}解析失败: {e}")
            raise ConfigError(f"配置文件{self.file_path}解析失败: {e}")
        root = tree.getroot()
        self.config = self._parse_element(root)
        self.last_modified_time = os.path.getmtime(self.file_path)
        return self.config

    def _parse_element(self, element):
        if list(element):
            return {child.tag: self._parse_element(child) for child in element}
        return element.text.strip() if element.text else None

    def check_and_reload(self):
        """文件修改时间变化时重新加载，返回是否重新加载"""
        try:
            modified_time = os.path.getmtime(self.file_path)
        except FileNotFoundError:
            logger.warning(f"配置文件{self.file_path}不存在")
            return False
        if self.last_modified_time is None or modified_time > self.last_modified_time:
            logger.info('检测到配置文件变动，重新加载配置信息')
            self.load_config()
            return True
        return False

    def get(self, *keys, default=None):
        """按层级取值，例如 get('inspector', 'value')"""
        if self.config is None:
            self.load_config()
        node = self.config
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def require(self, *keys):
        value = self.get(*keys)
        if value is None:
            raise ConfigError(f"配置文件缺少字段{'/'.join(keys)}")
        return value

    @property
    def display_mode(self) -> DisplayMode:
        mode = self.get('inspector', 'display_mode', default=DisplayMode.FIELD.value)
        try:
            return DisplayMode(mode)
        except ValueError:
            raise ConfigError(f"display_mode只能是field或per_bit，当前为{mode}")

    @property
    def default_value(self) -> str:
        return self.require('inspector', 'value')

    @property
    def csv_output(self) -> str:
        path = self.get('inspector', 'csv_output')
        # 空的<csv_output/>解析为None，同样使用默认路径
        if path is None:
            path = os.path.join('result', 'float_bits.csv')
        if not os.path.isabs(path):
            path = os.path.join(PROJECT_ROOT_PATH, path)
        return path
