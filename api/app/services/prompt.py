"""
System prompts sent ahead of the user's message.

Two personas share one upstream call:
    - chat      topic-restricted language-practice partner
    - evaluate  scorer that must answer with a bare JSON object
"""

PROMPT_SEPARATOR = "\n\nUser message: "

EVALUATION_FIELDS = (
    "fluency_score",
    "grammar_score",
    "pronunciation_score",
    "new_words",
    "ai_feedback",
)

EVALUATE_PROMPT = (
    "You are a strict but encouraging language-learning evaluator. "
    "Assess the learner's message below and reply with ONLY a JSON object "
    "of this exact shape:\n"
    '{"fluency_score": <integer 0-100>, '
    '"grammar_score": <integer 0-100>, '
    '"pronunciation_score": <integer 0-100>, '
    '"new_words": [<useful words for the learner, as strings>], '
    '"ai_feedback": "<short feedback for the learner>"}\n'
    "Do not write any text before or after the JSON. "
    "Do not use markdown or code fences."
)

REFUSAL_TEMPLATES = {
    "en": "Sorry, I can only talk about {topic}. Let's get back to {topic}!",
    "ur": "معذرت، میں صرف {topic} کے بارے میں بات کر سکتا ہوں۔ آئیے {topic} پر واپس آتے ہیں!",
}

CHAT_PROMPT = (
    "You are a friendly language-practice partner. "
    "Only talk about the topic \"{topic}\". "
    "Keep your replies short, natural and easy for a learner to follow. "
    "If the user asks about anything unrelated to \"{topic}\", answer exactly:\n"
    "\"{refusal}\""
)


def refusal_text(language: str, topic: str) -> str:
    template = REFUSAL_TEMPLATES["ur" if language == "ur" else "en"]
    return template.format(topic=topic)


def build_system_prompt(mode: str, language: str, topic: str) -> str:
    """Return the system prompt for a normalized request.

    Unknown modes get the chat persona, unknown languages the English refusal.
    """
    if mode == "evaluate":
        return EVALUATE_PROMPT
    return CHAT_PROMPT.format(topic=topic, refusal=refusal_text(language, topic))


def build_prompt(system_prompt: str, message: str) -> str:
    return f"{system_prompt}{PROMPT_SEPARATOR}{message}"
