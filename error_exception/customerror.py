class InvalidInputError(Exception):
    """
    输入无法解析为32位浮点数时引发的异常
    """
    def __init__(self, message="输入无法解析为32位浮点数"):
        super().__init__(message)


class ConfigError(Exception):
    """
    配置文件缺少必要字段或字段取值非法时引发的异常
    """
    def __init__(self, message="配置文件内容有误"):
        super().__init__(message)
