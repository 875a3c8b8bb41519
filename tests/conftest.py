"""
Shared fixtures: project root on sys.path, credential control, sample pages.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

import config  # noqa: E402

FILLER = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 4

ARTICLE_HTML = f"""
<html>
  <head>
    <title>Fallback title</title>
    <meta property="og:title" content="Hello">
    <meta property="article:published_time" content="2024-03-01T10:00:00Z">
  </head>
  <body>
    <header><nav>Home | About</nav></header>
    <article>
      <h1>Heading</h1>
      <p>{FILLER}</p>
      <script>var tracking = 1;</script>
    </article>
    <footer>Copyright</footer>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Tests never see a real key from the environment or .env."""
    monkeypatch.setattr(config, "OPENROUTER_API_KEY", "")


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(config, "OPENROUTER_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def article_html():
    return ARTICLE_HTML


@pytest.fixture
def filler():
    return FILLER.strip()
