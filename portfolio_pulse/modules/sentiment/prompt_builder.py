from __future__ import annotations

from portfolio_pulse.core.types import GenerationRequest


def build_classification_request(text: str) -> GenerationRequest:
    prompt = (
        "Analyze the sentiment of the following financial news headlines and classify it as "
        "POSITIVE, NEUTRAL, or NEGATIVE.\n"
        "Respond with only one word: POSITIVE, NEUTRAL, or NEGATIVE.\n\n"
        f"Headlines:\n{text}"
    )
    return GenerationRequest(
        prompt=prompt,
        max_tokens=10,
        temperature=0.3,
        k=0,
        p=1.0,
        frequency_penalty=0.0,
        presence_penalty=0.0,
        stop_sequences=["\n"],
        return_likelihoods="NONE",
    )


def build_summary_request(text: str, sentiment: str) -> GenerationRequest:
    prompt = (
        "Analyze the following financial news and provide a brief (1-2 sentence) summary of the "
        f"{sentiment.lower()} sentiment for an investor. Focus on key points that would be relevant "
        f"for investment decisions.\n\nNews:\n{text}\n\nSummary:"
    )
    return GenerationRequest(
        prompt=prompt,
        max_tokens=100,
        temperature=0.3,
        k=0,
        p=0.75,
        frequency_penalty=0.0,
        presence_penalty=0.0,
    )
