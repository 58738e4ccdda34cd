"""Challenge type definitions and the built-in challenge sequence."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

ChallengeId = str

# Sentinels outside the orderable sequence
WELCOME: ChallengeId = "welcome"
DONE: ChallengeId = "done"
SENTINELS = frozenset({WELCOME, DONE})


class ChallengeKind(str, Enum):
    """Broad families of challenges."""

    TYPING = "typing"
    TRIVIA = "trivia"
    MCQ = "mcq"
    CODING = "coding"
    PUZZLE = "puzzle"
    SPEED = "speed"
    SECURITY = "security"
    GAME = "game"
    MISC = "misc"


class Challenge(BaseModel):
    """A single mini-challenge in the run."""

    id: ChallengeId
    title: str = Field(description="Label shown in the navigation rail")
    kind: ChallengeKind = Field(default=ChallengeKind.MISC)
    description: Optional[str] = Field(default=None)

    @property
    def is_mcq(self) -> bool:
        return self.kind == ChallengeKind.MCQ


def _mcq(number: int) -> Challenge:
    return Challenge(id=f"mcq{number}", title=f"MCQ-{number}", kind=ChallengeKind.MCQ)


def _phishing(number: int) -> Challenge:
    return Challenge(
        id=f"phishing{number}",
        title=f"Phishing-{number}",
        kind=ChallengeKind.SECURITY,
    )


# (id, title, kind) for everything that isn't an MCQ or phishing round
_T = ChallengeKind
_ENTRIES = [
    ("typing", "Speed Typing", _T.TYPING),
    ("trivia", "Trivia", _T.TRIVIA),
    1,
    ("html", "HTML Coding", _T.CODING),
    ("html_debug", "HTML Debugging", _T.CODING),
    ("click", "Clicks Per Second", _T.SPEED),
    2,
    ("js", "JavaScript Coding", _T.CODING),
    ("sequence", "Sequence Search", _T.SPEED),
    ("star_pattern", "Star Pattern", _T.CODING),
    3,
    ("memory", "Memory Match", _T.GAME),
    ("magic", "Magic Word Count", _T.PUZZLE),
    4,
    ("hiddenpassword", "Hidden Password", _T.PUZZLE),
    ("python_average", "Python Coding", _T.CODING),
    ("python_mentor", "Python Mentor", _T.CODING),
    ("spanishloop", "Spanish Translation", _T.TRIVIA),
    5,
    ("binary", "Binary Code", _T.PUZZLE),
    ("phishing", 1),
    ("phishing", 2),
    ("phishing", 3),
    ("realorfake", "Real/Fake", _T.TRIVIA),
    ("number_guessing", "Number Guessing", _T.GAME),
    ("connections", "AI Connections", _T.PUZZLE),
    ("rearrange", "Rearrange", _T.PUZZLE),
    ("typing2", "Typing 2", _T.TYPING),
    6,
    ("matchstick", "Matchstick Puzzle", _T.PUZZLE),
    7,
    ("wordle", "Daily Wordle", _T.GAME),
    8,
    ("prompt", "AI Prompting", _T.MISC),
    ("password_strength", "Password Validator", _T.SECURITY),
    ("ip_geolocation", "IP Geolocation", _T.TRIVIA),
    9,
    ("tictactoe", "Tic-Tac-Toe vs AI", _T.GAME),
    10,
    ("persona", "Persona", _T.SECURITY),
    ("URL", "URL", _T.SECURITY),
    ("imageTrivia", "Campus Trivia", _T.TRIVIA),
    11,
    ("similarity", "Image Description", _T.MISC),
    ("hiddencode", "Hidden Code", _T.PUZZLE),
    ("console_hack", "Console Hack", _T.SECURITY),
    ("dino", "Obstacle Run", _T.GAME),
    12,
    ("loopshirt", "Spot the Looper", _T.GAME),
    13,
    ("match_connect", "Tech Mix & Match", _T.PUZZLE),
    ("pinpoint", "Pinpoint", _T.PUZZLE),
    ("hex_conversion", "Hex Conversion", _T.PUZZLE),
    ("fizzbuzz", "FizzBuzz", _T.CODING),
    ("ball_challenge_1", "Ball: Move Right", _T.CODING),
    ("guess_the_flag", "Guess the Flag", _T.TRIVIA),
    ("website_count", "Website Count", _T.TRIVIA),
    ("python_random_loop", "Python Random Loop", _T.CODING),
    14,
    ("hex_to_binary", "Hex to Binary", _T.PUZZLE),
    ("lua_prime", "Lua Prime Coding", _T.CODING),
    ("logic_gate", "Logic Gate Builder", _T.PUZZLE),
    ("dual_trivia", "World Cup Trivia", _T.TRIVIA),
    ("windows_timeline", "Windows Timeline", _T.TRIVIA),
    ("spot_the_pattern", "Spot the Pattern", _T.PUZZLE),
    ("az_speed_test", "A-Z Speed Test", _T.SPEED),
    ("js_array_sum", "JS Array Sum", _T.CODING),
    ("color_confusion", "Color Confusion", _T.SPEED),
    ("python_calculator", "Python Calculator", _T.CODING),
    ("arduino_blink", "Arduino Blink", _T.CODING),
    ("ball_challenge_2", "Ball: Draw Square", _T.CODING),
    ("connections_grid", "Connections Puzzle", _T.PUZZLE),
    ("number_speed_test", "1-100 Speed Test", _T.SPEED),
    ("interactive_binary", "Dec to Binary", _T.PUZZLE),
    ("lua_maxof3", "Lua Max Value", _T.CODING),
    15,
    ("ball_challenge_3", "Ball: Diagonal Move", _T.CODING),
    ("memory_pattern", "Memory Pattern", _T.GAME),
    ("sql_challenge_1", "SQL: Select All", _T.CODING),
    ("sql_challenge_2", "SQL: Filter Age", _T.CODING),
    ("sql_challenge_3", "SQL: Sort & Filter", _T.CODING),
    ("sandbox_login", "Sandbox Login", _T.SECURITY),
    ("coding_typing", "Coding Typing", _T.TYPING),
    ("html_list", "HTML List", _T.CODING),
    ("ball_challenge_4", "Ball: Zig Zag", _T.CODING),
    ("cipher", "Cryptography", _T.PUZZLE),
    16,
    ("secure_or_not", "Secure or Not?", _T.SECURITY),
    ("timezone", "Time Zones", _T.TRIVIA),
]


def _build(entries) -> list[Challenge]:
    challenges = []
    for entry in entries:
        if isinstance(entry, int):
            challenges.append(_mcq(entry))
        elif entry[0] == "phishing":
            challenges.append(_phishing(entry[1]))
        else:
            challenge_id, title, kind = entry
            challenges.append(Challenge(id=challenge_id, title=title, kind=kind))
    return challenges


# Canonical order of the event
BUILTIN_CHALLENGES = _build(_ENTRIES)
