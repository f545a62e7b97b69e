import logging
import datetime
import logging.handlers
import os

# 日志格式
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d"
# 日期格式
DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


def get_logger(name, **kwargs):
    """
    创建并返回一个日志记录器。

    参数:
    - name: 日志记录器的名称。
    - filename: 日志文件路径，默认为 log/{name}.log。
    - stream_level: 终端输出的级别，默认 WARNING。
    - file_level: 文件输出的级别，默认 INFO。

    终端输出写到 stderr，标准输出只留给位表格。
    文件按天滚动，保留最近两个备份。
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    filename = kwargs.get('filename', os.path.join('log', f'{name}.log'))
    log_dir = os.path.dirname(filename)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    stream_handler = logging.StreamHandler()
    rf_handler = logging.handlers.TimedRotatingFileHandler(
        filename=filename,
        when='midnight',
        interval=1,
        backupCount=2,
        atTime=datetime.time(0, 15, 30, 0),
        encoding='utf-8',
        delay=True
    )
    stream_handler.setLevel(kwargs.get('stream_level', logging.WARNING))
    rf_handler.setLevel(kwargs.get('file_level', logging.INFO))

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    stream_handler.setFormatter(fmt)
    rf_handler.setFormatter(fmt)

    # 重复获取同名logger时不重复添加处理器
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        logger.addHandler(stream_handler)

    if not any(isinstance(h, logging.handlers.TimedRotatingFileHandler) and
               h.baseFilename == rf_handler.baseFilename for h in logger.handlers):
        logger.addHandler(rf_handler)

    return logger


if __name__ == "__main__":
    log = get_logger(__name__)
    log.warning('hello world')
