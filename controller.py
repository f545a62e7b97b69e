import argparse
import os
import sys

from bit_format.table_formatter import render
from config import ConfigHandler, DisplayMode, DEFAULT_CONFIG_PATH
from data_process.bits_table import BitsTable
from dataio.csv_handler import CSVReader, CSVWriter
from error_exception.customerror import InvalidInputError, ConfigError
from msg_log.mylog import get_logger
from myfloat import FloatBits, decompose, parse_float32, parse_bits

PROJECT_ROOT_PATH = os.path.dirname(os.path.abspath(__file__))
logger = get_logger(
    __name__, filename=os.path.join(PROJECT_ROOT_PATH, "log", "controll.log")
)


class InspectController:
    """整个程序的控制类：读取配置、解析输入、拆分并输出"""

    def __init__(self, config_file: str = DEFAULT_CONFIG_PATH, **kwargs):
        self.config_handler = ConfigHandler(config_file)
        self.config_handler.load_config()
        self.mode = kwargs.get('mode') or self.config_handler.display_mode
        if not isinstance(self.mode, DisplayMode):
            self.mode = DisplayMode(self.mode)
        self.reader = kwargs.get('reader', CSVReader())
        self.writer = kwargs.get('writer', CSVWriter())

    def inspect_value(self, text=None):
        """
        解析并拆分一个数值
        :param text: 输入，为None时使用配置文件中的默认值
        :return: (float32数值, FloatBits)
        """
        if text is None:
            text = self.config_handler.default_value
        value = parse_float32(text)
        return value, decompose(value)

    def inspect_bits(self, text):
        """根据原始位模式拆分，返回 (float32数值, FloatBits)"""
        float_bits = FloatBits.from_bits(parse_bits(text))
        return float_bits.to_float(), float_bits

    def render(self, value, float_bits: FloatBits) -> str:
        return render(value, float_bits, self.mode.value)

    def run(self, text=None, bits=None) -> str:
        if bits is not None:
            value, float_bits = self.inspect_bits(bits)
        else:
            value, float_bits = self.inspect_value(text)
        return self.render(value, float_bits)

    def run_batch(self, input_csv: str, output_csv: str = None):
        """批量拆分csv中的数值并写入结果文件"""
        output_csv = output_csv or self.config_handler.csv_output
        values = self.reader.read_values(input_csv)
        table = BitsTable(values).build()
        self.writer.write_table(table, output_csv)
        return table


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='查看32位浮点数的符号、指数、尾数')
    parser.add_argument('value', nargs='?', help='要拆分的数值，缺省时使用配置文件中的值')
    parser.add_argument('--bits', help='以原始32位位模式作为输入，例如 0x3f8ccccd')
    parser.add_argument('--mode', choices=[m.value for m in DisplayMode], help='输出模式')
    parser.add_argument('--config', default=DEFAULT_CONFIG_PATH, help='配置文件路径')
    parser.add_argument('--csv-in', dest='csv_in', help='批量模式的输入csv，需包含value列')
    parser.add_argument('--csv-out', dest='csv_out', help='批量模式的输出csv')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        controller = InspectController(args.config, mode=args.mode)
        if args.csv_in:
            table = controller.run_batch(args.csv_in, args.csv_out)
            print(table.to_string(index=False))
        else:
            print(controller.run(args.value, args.bits))
    except (InvalidInputError, ConfigError) as e:
        logger.error(f"执行失败: {e}")
        print(e, file=sys.stderr)
        return 2
    return 0


if __name__ == '__main__':
    sys.exit(main())
