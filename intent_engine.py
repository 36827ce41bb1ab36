from constants import INTENT_PATTERNS


def classify(message: str):
    text = message.lower()

    for topic, any_of, all_of in INTENT_PATTERNS:
        if all(p in text for p in all_of) and any(p in text for p in any_of):
            return topic

    return "default"
