"""User-facing strings for the chat widget."""

from support_chat.models.schemas import ErrorKind

SUPPORT_EMAIL = "motion.support@splyza.com"

QUOTA_EXCEEDED_MESSAGE = (
    "申し訳ありません。ただいまアクセスが集中しており、回答を生成できません。\n\n"
    "少し待ってから再度お試しいただくか、お急ぎの場合は以下のサポート窓口までお問い合わせください。\n\n"
    "▼SPLYZAカスタマーサポート\n"
    f"{SUPPORT_EMAIL}"
)
GENERIC_ERROR_PREFIX = "エラーが発生しました: "
UNKNOWN_ERROR = "予期せぬエラー"

BRAND_LABEL = "SPLYZA Motion"
PAGE_TITLE = "SPLYZA Chatbot"
WELCOME_HEADING = "お手伝いできることはありますか？"
INPUT_PLACEHOLDER = "メッセージを入力..."
LOADING_TEXT = "回答生成中..."
DISCLAIMER = "AIは間違いを犯すことがあります。重要な情報はヘルプセンターでご確認ください。"


def failure_text(kind: ErrorKind, message: str) -> str:
    """Text shown in place of an answer when the relay call fails.

    Args:
        kind: Error kind reported by the relay.
        message: Error message reported by the relay.

    Returns:
        The fixed high-traffic notice for quota failures, otherwise the
        generic error line with the message.
    """
    if kind is ErrorKind.QUOTA_EXCEEDED:
        return QUOTA_EXCEEDED_MESSAGE
    return f"{GENERIC_ERROR_PREFIX}{message or UNKNOWN_ERROR}"
