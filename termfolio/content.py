"""Résumé text, links and ASCII art shown by the portfolio."""

from __future__ import annotations

SITE_DOMAIN = "portfolio.example.com"

GMAIL_URL = "mailto:owner@example.com"
LINKEDIN_URL = "https://linkedin.example.com/in/portfolio-owner"
GITHUB_URL = "https://github.example.com/portfolio-owner"
TWITTER_URL = "https://x.example.com/portfolio-owner"
GOCHESS_DEMO_URL = "https://chess.example.com/"
PYGIT_URL = "https://github.example.com/portfolio-owner/pygit"
PACMAN_RL_URL = "https://github.example.com/portfolio-owner/pacman"

EMAIL = "owner@example.com"
LOCATION = "Example City"

WELCOME_TITLE = "Portfolio Owner"

WELCOME_BODY = (
    "Student & software engineer — CLIs, agents, and systems that feel good in a real terminal.\n"
    "I try to build low latency and agentic systems."
)

ABOUT_TEXT = (
    "I'm a software engineer, I build backends, agentic workflows,\n"
    "and performance-minded tools — Go, TypeScript, and whatever fits the problem."
)

INTRO_BLURB = (
    "B.Tech Mechanical Engineering @ Example Institute of Technology (2023–2027, CGPA 8.28).\n"
    "Focused on LLM orchestration, RAG, game engines, and low-level systems — "
    "from WASM chess to Git internals."
)

EDUCATION_BLOCK = (
    "  Example Institute of Technology\n"
    "  B.Tech — Mechanical Engineering\n"
    "  2023 – 2027  ·  CGPA 8.28"
)

SKILLS_BLOCK = (
    "  Languages   JavaScript, TypeScript, Go, Python, C++, C#, Java\n"
    "  Frameworks  React, Next.js, Node.js, Express.js, React Native\n"
    "  AI / ML     TensorFlow, OpenCV, LangChain, LangGraph, Reinforcement Learning\n"
    "  Tools       Git, Docker, Firebase, Redis, Postman, Vercel, WebAssembly"
)

EXPERIENCE_BLOCK = """\
  Software Engineer — Example Startup
  Dec 2025 – April 2026

  • LLM-driven orchestration engine: decompose complex queries into execution plans (DAG)
    and coordinate agents (BIM, Document, Web).
  • Agentic BIM system: dynamic PostgreSQL over 10k+ building elements; natural language
    queries on spatial / architectural properties.
  • Hybrid RAG: PgVector semantic search + keyword matching + section-aware retrieval
    (~25% retrieval accuracy gain).
  • Data pipelines: IFC/SVF2 ingestion, relational schema mapping, Redis Streams for
    real-time updates (~35% lower response latency)."""

PROJECTS_BLOCK = """\
  GoChess Engine
    Full chess engine: minimax + alpha-beta (~60% search reduction), Zobrist transposition
    tables, quiescence search, material + piece-square evaluation. WASM build (~3× vs JS),
    multi-worker parallel search (~40% faster move compute).

  PyGit — Git clone
    Blob, tree, commit objects; SHA-1 content-addressable storage; staging index; commit DAG
    traversal; CLI: init, add, commit, log.

  Pacman AI (RL)
    Q-learning / DQN agent; state design, reward shaping (~30% faster convergence),
    ~2× average score; epsilon-greedy exploration tuning."""

# Six-row block glyphs used for the large banner on the curl page.
_GLYPHS: dict[str, tuple[str, ...]] = {
    "T": ("████████╗", "╚══██╔══╝", "   ██║   ", "   ██║   ", "   ██║   ", "   ╚═╝   "),
    "E": ("███████╗", "██╔════╝", "█████╗  ", "██╔══╝  ", "███████╗", "╚══════╝"),
    "R": ("██████╗ ", "██╔══██╗", "██████╔╝", "██╔══██╗", "██║  ██║", "╚═╝  ╚═╝"),
    "M": (
        "███╗   ███╗",
        "████╗ ████║",
        "██╔████╔██║",
        "██║╚██╔╝██║",
        "██║ ╚═╝ ██║",
        "╚═╝     ╚═╝",
    ),
    "F": ("███████╗", "██╔════╝", "█████╗  ", "██╔══╝  ", "██║     ", "╚═╝     "),
    "O": (" ██████╗ ", "██╔═══██╗", "██║   ██║", "██║   ██║", "╚██████╔╝", " ╚═════╝ "),
    "L": ("██╗     ", "██║     ", "██║     ", "██║     ", "███████╗", "╚══════╝"),
    "I": ("██╗", "██║", "██║", "██║", "██║", "╚═╝"),
}


def _block_word(word: str, indent: str = "   ") -> str:
    rows = zip(*(_GLYPHS[letter] for letter in word))
    return "\n".join(indent + "".join(row) for row in rows)


NAME_TOP = _block_word("TERM")
NAME_BOTTOM = _block_word("FOLIO")

# Slim "terminal" panel used on the home screen.
ASCII_LEFT_PANEL = """\
   +--------------+
   |##############|
   |#  .------.  #|
   |# (        ) #|
   |#  '------'  #|
   |#    |  |    #|
   |##############|
   +--------------+
   ___|________|___"""

ASCII_HELLO_LETTERS = """
#   # ##### #     #     # 
#   # #     #     #     # 
##### ##### #     #     # 
#   # #     #     #     # 
#   # ##### ##### ##### #####"""

ASCII_WORLD_LINE = "        w  o  r  l  d"

BATMAN_LOGO = r"""
           _                         _
       _==/          i     i          \==
     /XX/            |\___/|            \XX\
   /XXXX\            |XXXXX|            /XXXX\
  |XXXXXX\_         _XXXXXXX_         _/XXXXXX|
 XXXXXXXXXXXxxxxxxxXXXXXXXXXXXxxxxxxxXXXXXXXXXXX
|XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX|
XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX
|XXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX|
 XXXXXX/^^^^"\XXXXXXXXXXXXXXXXXXXXX/^^^^^\XXXXXX
  |XXX|       \XXX/^^\XXXXX/^^\XXX/       |XXX|
    \XX\       \X/    \XXX/    \X/       /XX/
                "\        "      \X/      "       /"
                                  !
"""

CAT_ASCII = r"""
       /\_/\  
      ( o.o ) 
       > ^ <
      /|   |\
     (_|   |_)"""


def split_lines(s: str) -> list[str]:
    """Split text into lines after trimming leading and trailing newlines."""
    s = s.strip("\n")
    if not s:
        return []
    return s.split("\n")


def rune_len(s: str) -> int:
    """Number of code points in ``s``."""
    return len(s)