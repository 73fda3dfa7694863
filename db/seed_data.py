"""
db/seed_data.py
---------------
Default networking questions inserted into an empty store so the bot is
usable out of the box.
"""

from models.question import Question

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        question_text="What is an IP address?",
        options=(
            "A unique identifier of a device on a network",
            "A data transfer protocol",
            "A type of cable",
            "A network application",
        ),
        correct_index=0,
        category="Basics",
    ),
    Question(
        question_text="Which port does HTTP use?",
        options=("80", "443", "21", "25"),
        correct_index=0,
        category="Protocols",
    ),
    Question(
        question_text="What is DNS?",
        options=(
            "Domain Name System",
            "A network protocol",
            "A type of server",
            "A programming language",
        ),
        correct_index=0,
        category="Protocols",
    ),
    Question(
        question_text="Which protocol establishes a connection?",
        options=("TCP", "UDP", "HTTP", "ICMP"),
        correct_index=0,
        category="Protocols",
    ),
    Question(
        question_text="What is a MAC address?",
        options=(
            "The physical address of a network card",
            "The IP address of a router",
            "A domain name",
            "A Wi-Fi password",
        ),
        correct_index=0,
        category="Hardware",
    ),
)
