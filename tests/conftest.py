"""Shared fixtures for the scoring tests."""
import os

os.environ.setdefault("PREPSCORE_NO_LOG_FILE", "1")

import pytest

from prepscore.lexicon import reload_lexicon

BEHAVIORAL_QUESTION = "What challenge did your team face on a difficult project?"

STAR_ANSWER = (
    "The situation was a difficult project at my previous company. Our team faced a "
    "tight deadline because a key vendor dropped out two weeks before launch. My task "
    "was to lead the recovery and keep the client informed."
    "\n\n"
    "First, I took action by splitting the remaining work into small pieces and "
    "assigning each piece to the engineer best suited for it. Second, I set up a short "
    "daily meeting so that every specific blocker surfaced early. However, the biggest "
    "challenge was keeping morale high while people worked long hours."
    "\n\n"
    "Finally, the result was that we shipped on time and the client renewed the "
    "contract for another year. I learned that clear communication and early planning "
    "improve success far more than heroic effort at the end."
)

RESUME_LINES = [
    "Jane Doe",
    "jane.doe@example.com | (555) 123-4567",
    "",
    "Summary",
    "Backend developer focused on reliable APIs.",
    "",
    "Experience",
    "Senior Software Engineer at Acme Corp., Austin",
    "- Led migration of 12 services to Kubernetes",
    "- Increased sales by 20% through a new checkout flow",
    "- Reduced infrastructure cost by $40000 per year",
    "Software Developer | Globex Inc., Remote",
    "- Built REST APIs in Python and Django for 50000 users",
    "",
    "Education",
    "Bachelor of Science in Computer Science",
    "State University, 2015",
    "",
    "Skills",
    "Python, Django, PostgreSQL, Docker, AWS, Git, SQL",
    "",
    "Projects",
    "Inventory Tracker",
    "Built a Flask app to manage stock levels.",
    "Chat Bot",
    "Created a support bot that answered common questions.",
]

SPARSE_RESUME = (
    "John Smith\n"
    "Worked on various tasks for a local shop\n"
    "Helped customers daily"
)


@pytest.fixture(autouse=True)
def _default_lexicon(monkeypatch):
    """Every test starts from the bundled lexicon."""
    monkeypatch.delenv("PREPSCORE_LEXICON", raising=False)
    reload_lexicon()
    yield
    reload_lexicon()


@pytest.fixture
def star_answer():
    return STAR_ANSWER


@pytest.fixture
def behavioral_question():
    return BEHAVIORAL_QUESTION


@pytest.fixture
def resume_text():
    return "\n".join(RESUME_LINES)


@pytest.fixture
def sparse_resume():
    return SPARSE_RESUME


@pytest.fixture
def words():
    """Build an answer of exactly *n* words."""
    def _make(n: int) -> str:
        return " ".join(f"word{i}" for i in range(n))
    return _make
