"""Console text, in English and Chinese.

Templates use str.format fields. Values substituted into them must be
escaped by the caller before printing with rich markup.
"""

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "config_failed": "Unable to load the configuration. Check that config.json exists and is well-formed.",
        "config_detail": "Error while loading the configuration file: {error}",
        "prompt": "Enter the text to send (up to {limit} characters):",
        "too_long": "Input exceeds {limit} characters. Please shorten it and try again.",
        "network_error": "Network request failed: {error}",
        "unknown_error": "An unknown error occurred: {error}",
        "output_warning": "Warning: the reply exceeds the output limit!",
        "result_header": "Processed text:",
        "loading": "Loading",
    },
    "zh": {
        "config_failed": "无法加载配置文件，请检查config.json文件是否存在且格式正确。",
        "config_detail": "加载配置文件时发生错误: {error}",
        "prompt": "请输入要请求的文本（最多{limit}字符）：",
        "too_long": "输入文本长度超过{limit}字符，请缩短后重试。",
        "network_error": "网络请求失败: {error}",
        "unknown_error": "发生未知错误: {error}",
        "output_warning": "警告：返回的Token数量超出限制！",
        "result_header": "处理后的文本：",
        "loading": "Loading",
    },
}


def message(key: str, language: str = "en", **fields: object) -> str:
    """Look up a console message and fill in its fields."""
    catalog = MESSAGES.get(language, MESSAGES["en"])
    return catalog[key].format(**fields)
