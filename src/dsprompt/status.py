"""HTTP status diagnostics for the DeepSeek API.

A static table of the status codes the API documents, rendered as one
console line each. Codes outside the table get a generic line carrying
the numeric value.
"""

from rich.console import Console
from rich.markup import escape

STATUS_MESSAGES: dict[str, dict[int, str]] = {
    "en": {
        400: "400 - Invalid Format: The request body is malformed. Fix it according to the error message.",
        401: "401 - Authentication Fails: The API key is wrong. Check that your API key is correct.",
        402: "402 - Insufficient Balance: Your account balance has run out. Top up your account.",
        422: "422 - Invalid Parameters: The request contains invalid parameters. Fix them according to the error message.",
        429: "429 - Rate Limit Reached: You are sending requests too quickly (TPM or RPM). Pace your requests.",
        500: "500 - Server Error: The server hit an internal fault. Retry after a brief wait; contact support if it persists.",
        503: "503 - Server Overloaded: The server is under heavy load. Retry your request later.",
    },
    "zh": {
        400: "400 - 格式错误: 请求体格式错误，请根据错误信息提示修改请求体。",
        401: "401 - 认证失败: API key 错误，认证失败，请检查您的 API key 是否正确。",
        402: "402 - 余额不足: 账号余额不足，请确认账户余额并前往充值页面进行充值。",
        422: "422 - 参数错误: 请求体参数错误，请根据错误信息提示修改相关参数。",
        429: "429 - 请求速率达到上限: 请求速率（TPM 或 RPM）达到上限，请合理规划您的请求速率。",
        500: "500 - 服务器故障: 服务器内部故障，请等待后重试。若问题一直存在，请联系我们解决。",
        503: "503 - 服务器繁忙: 服务器负载过高，请稍后重试您的请求。",
    },
}

UNHANDLED_STATUS: dict[str, str] = {
    "en": "Unknown error: received unhandled HTTP status code {code}.",
    "zh": "未知错误: 收到未处理的HTTP状态码 {code}。",
}


def describe_status(status_code: int, language: str = "en") -> str:
    """Return the diagnostic line for an HTTP status code."""
    table = STATUS_MESSAGES.get(language, STATUS_MESSAGES["en"])
    if status_code in table:
        return table[status_code]
    template = UNHANDLED_STATUS.get(language, UNHANDLED_STATUS["en"])
    return template.format(code=status_code)


def report_status(status_code: int, console: Console, language: str = "en") -> None:
    """Print the diagnostic line for an HTTP status code."""
    console.print(f"[red]{escape(describe_status(status_code, language))}[/red]")
