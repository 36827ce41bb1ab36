import logging
from collections import OrderedDict

from constants import (
    AIProvider,
    BUSINESS_KNOWLEDGE,
    DEFAULT_DEPARTMENT,
    GREETING,
    PRICING_SUMMARY,
    PROVIDER_FOOTERS,
    TOPIC_LAYOUTS,
)
from errors import InvalidProvider, MissingField
from intent_engine import classify
from utils import bullet_list, to_iso

logger = logging.getLogger(__name__)


def resolve_provider(tag):
    if isinstance(tag, AIProvider):
        return tag
    try:
        return AIProvider(tag)
    except ValueError:
        raise InvalidProvider(tag) from None


def format_response(topic, entry, provider):
    """Build the reply text for a classified topic.

    ``entry`` is the KnowledgeEntry for knowledge topics and ``None`` for the
    ``pricing`` and ``default`` outcomes, which use fixed text.
    """
    footer = PROVIDER_FOOTERS[resolve_provider(provider)]

    if entry is not None:
        layout = TOPIC_LAYOUTS[topic]
        body = "\n\n".join([
            layout["intro"],
            f"{layout['services']}\n{bullet_list(entry.services)}",
            f"{layout['pricing']} {entry.pricing}",
            f"{layout['requirements']}\n{bullet_list(entry.requirements)}",
            f"{layout['timeline']} {entry.timeline}",
            layout["closing"].format(department=entry.department),
        ])
    elif topic == "pricing":
        body = PRICING_SUMMARY
    else:
        body = GREETING

    return f"{body}\n\n{footer}"


def generate_business_response(message, provider="gpt"):
    topic = classify(message)
    entry = BUSINESS_KNOWLEDGE.get(topic)
    response = format_response(topic, entry, provider)
    department = entry.department if entry else DEFAULT_DEPARTMENT

    logger.info("Chat message classified as %r (provider=%s)", topic, provider)

    return OrderedDict([
        ("response", response),
        ("department", department),
    ])


def handle_chat(data, now):
    if not isinstance(data, dict):
        data = {}

    message = data.get("message")
    provider = data.get("aiProvider", AIProvider.GPT.value)
    language = data.get("language", "en")
    if not message:
        raise MissingField("Message is required")

    # "context" (prior turns) is accepted but not used.
    result = generate_business_response(message, provider)

    return OrderedDict([
        ("response", result["response"]),
        ("department", result["department"]),
        ("aiProvider", provider),
        ("language", language),
        ("timestamp", to_iso(now)),
    ])
