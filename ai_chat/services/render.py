from html import escape
from urllib.parse import quote

from ai_chat.models.chat import ChatMessage

USAGE_EXAMPLES = [
    "HTML: /api/AI?question=What is AI?&format=html",
    "JSON: /api/AI?question=What is AI?&format=json",
]

BASE_CSS = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
            color: #333;
        }"""

CHAT_CSS = BASE_CSS + """
        body { max-width: 800px; }
        .container {
            background: white;
            border-radius: 12px;
            padding: 30px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        h1 {
            color: #2c3e50;
            text-align: center;
            border-bottom: 3px solid #3498db;
            padding-bottom: 15px;
        }
        .chat-message { margin: 20px 0; padding: 15px; border-radius: 8px; border-left: 4px solid; }
        .user-message { background-color: #e3f2fd; border-left-color: #2196f3; }
        .ai-message { background-color: #f1f8e9; border-left-color: #4caf50; }
        .message-label { font-weight: bold; margin-bottom: 8px; font-size: 14px; text-transform: uppercase; }
        .message-content { line-height: 1.6; white-space: pre-wrap; }
        .timestamp { color: #666; font-size: 12px; margin-top: 10px; text-align: right; }
        .footer { text-align: center; margin-top: 30px; color: #666; font-size: 14px; }
        .format-toggle { text-align: center; margin-bottom: 20px; }
        .format-link {
            display: inline-block;
            margin: 0 10px;
            padding: 8px 16px;
            background: #3498db;
            color: white;
            text-decoration: none;
            border-radius: 6px;
        }
        .format-link:hover { background: #2980b9; }"""

ERROR_CSS = BASE_CSS + """
        body { max-width: 600px; }
        .error-container {
            background: white;
            border-radius: 12px;
            padding: 30px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
            text-align: center;
            border-left: 5px solid #e74c3c;
        }
        .error-icon { font-size: 48px; margin-bottom: 20px; }
        .error-message { color: #e74c3c; font-size: 18px; margin-bottom: 20px; }
        .example {
            background: #f8f9fa;
            padding: 15px;
            border-radius: 8px;
            font-family: monospace;
            color: #666;
            margin: 10px 0;
        }"""


def _page(title: str, css: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{css}
    </style>
</head>
<body>
{body}
</body>
</html>"""


def _message_card(message: ChatMessage, css_class: str, label: str) -> str:
    return f"""        <div class="chat-message {css_class}">
            <div class="message-label">{label}</div>
            <div class="message-content">{escape(message.message)}</div>
            <div class="timestamp">{escape(message.timestamp)}</div>
        </div>"""


def format_link(question: str, fmt: str) -> str:
    """Query string that re-asks the same question in another format."""
    return f"?question={quote(question, safe='')}&format={fmt}"


def render_chat_page(user_message: ChatMessage, ai_message: ChatMessage) -> str:
    """Render the question/answer pair as a standalone HTML page."""
    question = user_message.message
    body = f"""    <div class="container">
        <h1>🤖 AI Chat Response</h1>

        <div class="format-toggle">
            <a href="{format_link(question, 'html')}" class="format-link">HTML View</a>
            <a href="{format_link(question, 'json')}" class="format-link">JSON View</a>
        </div>

{_message_card(user_message, "user-message", "👤 Your Question:")}

{_message_card(ai_message, "ai-message", "🤖 AI Response:")}

        <div class="footer">
            <p>Powered by Google Gemini AI</p>
        </div>
    </div>"""
    return _page("AI Chat Response", CHAT_CSS, body)


def render_error_page(error_message: str) -> str:
    examples = "\n".join(
        f'        <div class="example">{example}</div>' for example in USAGE_EXAMPLES
    )
    body = f"""    <div class="error-container">
        <div class="error-icon">❌</div>
        <div class="error-message">{escape(error_message)}</div>
{examples}
    </div>"""
    return _page("Error - AI Chat", ERROR_CSS, body)
