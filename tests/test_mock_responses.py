import pytest

from Advisory.services.chatbot.chatbot_schemas import Language
from Advisory.services.chatbot.mock_responses import MOCK_RESPONSES, detect_topic, get_mock_response


@pytest.mark.parametrize(
    "question, topic",
    [
        ("How do I REGISTER a company?", "register"),
        ("Miten rekisteröin yrityksen?", "register"),
        ("如何注册公司", "register"),
        ("Where can I get funding?", "funding"),
        ("Tarvitsen rahoitusta", "funding"),
        ("Какое финансирование доступно?", "funding"),
        ("Hur fungerar skatt för företag?", "tax"),
        ("Какие налоги платить?", "tax"),
        ("Do I need a visa?", "visa"),
        ("Behöver jag uppehållstillstånd?", "visa"),
        ("Opening hours?", "default"),
    ],
)
def test_detect_topic(question, topic):
    assert detect_topic(question) == topic


def test_register_wins_over_later_topics():
    assert detect_topic("register and pay tax") == "register"


def test_reply_in_requested_language():
    assert get_mock_response("register", Language.swedish) == MOCK_RESPONSES[Language.swedish]["register"]
    assert get_mock_response("what?", "fi") == MOCK_RESPONSES[Language.finnish]["default"]


def test_every_language_covers_every_topic():
    for language in Language:
        assert set(MOCK_RESPONSES[language]) == {"register", "funding", "tax", "visa", "default"}
