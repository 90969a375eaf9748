"""Content feature - one command per Writesonic generation endpoint."""

from .blog import blog_ideas
from .commands import run_operation
from .service import generate_content

__all__ = [
    "blog_ideas",
    "generate_content",
    "run_operation",
]
