"""Prompt and request payload assembly for the Gemini generateContent call."""

from typing import Any

from support_chat.relay.knowledge import KnowledgeBase

GROUNDING_DIRECTIVE = "以下のナレッジベースのみを根拠として回答してください。"


def build_user_prompt(blob: str, message: str) -> str:
    """Combine the grounding directive, knowledge blob and question into one user turn."""
    return (
        f"{GROUNDING_DIRECTIVE}\n\n"
        f"【ナレッジベース】\n{blob}\n\n"
        f"【ユーザーの質問】\n{message}"
    )


def build_payload(
    knowledge: KnowledgeBase,
    message: str,
    temperature: float,
    max_output_tokens: int,
) -> dict[str, Any]:
    """Build the JSON body for a generateContent request.

    Args:
        knowledge: Loaded knowledge documents.
        message: The user's latest message.
        temperature: Sampling temperature.
        max_output_tokens: Maximum tokens in the answer.

    Returns:
        Payload with system_instruction, contents and generationConfig.
    """
    return {
        "system_instruction": {"parts": [{"text": knowledge.system_prompt}]},
        "contents": [
            {
                "role": "user",
                "parts": [{"text": build_user_prompt(knowledge.blob, message)}],
            }
        ],
        "generationConfig": {
            "temperature": temperature,
            "maxOutputTokens": max_output_tokens,
        },
    }
