"""System prompt for transcript summarization."""

from domain.models import SummaryConfig

SUMMARY_LENGTH_INSTRUCTIONS = {
    "brief": (
        "Keep the summary very concise (2-3 sentences) and extract only "
        "the 3 most important key points."
    ),
    "moderate": "Provide a moderate summary (4-5 sentences) and extract 5-7 key points.",
    "detailed": (
        "Write a detailed summary (6-8 sentences) and extract 8-10 key points "
        "with additional context."
    ),
    "comprehensive": (
        "Create a comprehensive summary (10-12 sentences) covering all major "
        "topics and extract 10-15 key points."
    ),
    "extensive": (
        "Generate an extensive summary (15+ sentences) with thorough coverage "
        "and extract 15+ key points with detailed explanations."
    ),
}

SAME_LANGUAGE = "same"


def build_summary_prompt(config: SummaryConfig) -> str:
    """Builds the system instruction for the summarization call."""
    length_instruction = SUMMARY_LENGTH_INSTRUCTIONS[config.summary_length]

    if config.output_language != SAME_LANGUAGE:
        language_instruction = (
            "IMPORTANT: Write your entire response (summary and key points) "
            f"in {config.output_language}."
        )
    else:
        language_instruction = (
            "Write your response in the same language as the transcription."
        )

    context_section = ""
    if config.context:
        context_section = (
            f"\n\nAdditional Context:\n{config.context}\n\n"
            "Use this context to better understand and analyze the transcription."
        )

    return (
        "You are a helpful assistant that summarizes transcribed audio.\n\n"
        f"{length_instruction}\n\n"
        f"{language_instruction}\n"
        f"{context_section}\n\n"
        "Format your response as JSON with two fields:\n"
        '- "summary" (string): The summary of the transcription\n'
        '- "key_points" (array of strings): The key points extracted from '
        "the transcription\n\n"
        "Ensure all text is in the specified language."
    )
