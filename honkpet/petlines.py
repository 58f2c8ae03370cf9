"""What the pet says: canned lines for each mood and random sentences."""

from __future__ import annotations

import random
from enum import Enum


class Mood(Enum):
    IDLE = "idle"
    CARRIED = "carried"
    HUNGRY = "hungry"
    BORED = "bored"
    TIRED = "tired"
    SHAKEN = "shaken"
    FIREPLACE = "fireplace"


def _entries(*chunks: str) -> tuple[str, ...]:
    """Split '|'-separated chunks into entries, in order, surrounding space removed."""
    return tuple(part.strip() for chunk in chunks for part in chunk.split("|"))


_LINES: dict[Mood, tuple[str, ...]] = {
    Mood.IDLE: _entries(
        "whassup | am good | lmao | uhhh | beep beep im a sheep | wheeyy",
        "heheheha | what to say | hello | a red spy is in the base!",
        "protect the briefcase | wahoo | are you in class | sudo rm -rf /",
        "gold gold gold | gonna play GooseStrike 2 | fatty fatty",
        "x formerly twitter | did you get those reports?",
        "i needed those reports by friday | git pull origin main",
        "git commit -m 'wheyy' | git push --force",
        "did you hear about that guy? | heard he got out of jail",
        "heard he got hit by a truck | heard he got fired",
        "heard he got electrocuted | see if your device needs charging",
        "what is my purpose?",
    ),
    Mood.CARRIED: _entries(
        "put me down! | bro stop | i hate this | stop it | omg why",
    ),
    Mood.HUNGRY: _entries(
        "stomach is a lil empty | anything in the fridge? | *rumble*",
        "food... | hubgry :(( | feed? | BRO FEED ME | IM ACTUALLY GONNA DIE",
        "SERIOUSLY I WILL DIE | GIVE ME FOOD. | you suck man give me food",
        "FOOD. IN. MY. MOUTH.",
    ),
    Mood.BORED: _entries(
        "so bored | play with me! | give me attention | please pong",
        "nothing is fun | fun time? | can we train for pong tournament",
        "pooooongggg",
    ),
    Mood.TIRED: _entries(
        "so tired | sleep... | bed pls | what time is it? bedtime",
        "PLEASE SLEEP | *yawn* | please i havent slept in 5 days",
        "i can die from exhaustion! just saying... | i will develop insomnia",
    ),
    Mood.SHAKEN: _entries(
        "bro stop shaking me | stop shaking i will die | 6 more g's and im dead",
        "is there a volcano wtf | are you in a car? | ouch!",
        "my stuff is breaking! | i can die from shaking! | i will get bruised",
    ),
    Mood.FIREPLACE: _entries(
        "toasty | i love marshmellow | consuming",
        "the chair cannot cook marshmellows | popcorn",
        "would you like a marshmellow?",
    ),
}

NOUNS = tuple(
    """
    cat dog robot car tree bird house computer book river mountain child
    city flower ocean star music man woman goose
    """.split()
)

ADJECTIVES = tuple(
    """
    fast red lazy funny bright silent tall ancient wild happy bitter cold
    gentle sharp brave calm
    """.split()
)

VERBS = tuple(
    """
    run jump drive fly sing laugh shine whisper dance climb swim dream
    wander hide glow build fart
    """.split()
)

ADVERBS = tuple(
    """
    quickly silently gracefully happily sadly loudly bravely carefully
    eagerly boldly slowly fiercely softly wildly brightly gently musically
    """.split()
)

TEMPLATES = _entries(
    "the <adj> <noun> <verb>s <adv>. | a <noun> that <adv> <verb>s is very <adj>.",
    "the <noun> <adv> <verb>s. | you know theres a <adj> <noun> over there",
    "idk, have you tried the <adj> <noun> that <verb>s <adv>?",
    "<adj> and <adj>, the <noun> <verb>s <adv> | why does the <noun> <verb> so <adv>?",
    "sometimes, the <adj> <noun>s <verb> in the night",
    "did you hear about the <noun> that <verb>s through the <noun>?",
    "<adj> <noun> <noun> | the <adj> <noun> need not <verb> <adv> to become <adj>",
    "yoo did you see the <noun>? | you sound so <adj> right now",
    "im <verb>ing right now",
)

_FILLERS = (
    ("<noun>", NOUNS),
    ("<adj>", ADJECTIVES),
    ("<verb>", VERBS),
    ("<adv>", ADVERBS),
)


def lines_for(mood: Mood) -> tuple[str, ...]:
    """All the canned lines for a mood."""
    return _LINES[Mood(mood)]


def random_line(mood: Mood, rng: random.Random | None = None) -> str:
    """One canned line for the mood, picked at random."""
    return (rng or random).choice(lines_for(mood))


def generate_sentence(rng: random.Random | None = None) -> str:
    """Fill a random template; every occurrence of a token gets the same word."""
    rng = rng or random
    sentence = rng.choice(TEMPLATES)
    for token, words in _FILLERS:
        sentence = sentence.replace(token, rng.choice(words))
    return sentence