"""Prompt construction for lecture summaries."""

SUMMARY_PROMPT_PREFIX = """Task: Summarize the following transcript of a STEM lecture. Extract the main points, key concepts, and essential details.

If any critical information is missing or unclear, use your knowledge to fill in gaps while staying true to the topic.
Output format: The summary must be written in Markdown. You may use:
  Headings (#, ##, ###) to structure content.
  Bullet points (-, *) for key points.
  Tables when presenting structured data.
  LaTeX ($inline$ or $$block$$) for mathematical notation.
Strict formatting rule: Output only the Markdown-formatted summary, with no extra text, explanations, or disclaimers. Any deviation from this instruction will result in a 0 grade.
Transcript:"""


def build_summary_prompt(transcript: str) -> str:
    """Appends the transcript verbatim to the fixed instruction prefix."""
    return SUMMARY_PROMPT_PREFIX + transcript
