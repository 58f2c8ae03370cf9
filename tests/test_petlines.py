import random

import pytest

from honkpet.petlines import (
    ADJECTIVES,
    ADVERBS,
    NOUNS,
    TEMPLATES,
    VERBS,
    Mood,
    generate_sentence,
    lines_for,
    random_line,
)


class _FirstChoice:
    """Always picks a fixed position from a sequence."""

    def __init__(self, template_index=0):
        self.template_index = template_index

    def choice(self, seq):
        if seq is TEMPLATES:
            return seq[self.template_index]
        return seq[0]


class _LastChoice:
    """Picks a fixed template and the last word of every list."""

    def __init__(self, template_index):
        self.template_index = template_index

    def choice(self, seq):
        if seq is TEMPLATES:
            return seq[self.template_index]
        return seq[-1]


class _RecordingChoice:
    """Records the size of every sequence it is asked to pick from."""

    def __init__(self):
        self.sizes = []

    def choice(self, seq):
        self.sizes.append(len(seq))
        return seq[0]


class _SeededTemplate:
    def __init__(self, rng, index):
        self.rng = rng
        self.index = index

    def choice(self, seq):
        if seq is TEMPLATES:
            return seq[self.index]
        return self.rng.choice(seq)


@pytest.mark.parametrize("mood", list(Mood))
def test_every_mood_has_lines(mood):
    assert len(lines_for(mood)) > 0


def test_line_counts_match_tables():
    assert len(lines_for(Mood.IDLE)) == 30
    assert lines_for(Mood.IDLE)[0] == "whassup"
    assert lines_for(Mood.IDLE)[21] == "git commit -m 'wheyy'"
    assert lines_for(Mood.IDLE)[-1] == "what is my purpose?"
    assert lines_for(Mood.CARRIED)[-1] == "omg why"
    assert len(lines_for(Mood.HUNGRY)) == 12
    assert len(lines_for(Mood.FIREPLACE)) == 6


def test_sentence_draws_from_each_word_list():
    picker = _RecordingChoice()
    generate_sentence(picker)
    assert picker.sizes == [14, 20, 16, 17, 17]


@pytest.mark.parametrize(
    "index, expected",
    [
        (13, "im farting right now"),
        (9, "calm goose goose"),
        (0, "the calm goose farts musically."),
    ],
)
def test_last_words_fill_templates(index, expected):
    assert generate_sentence(_LastChoice(index)) == expected


@pytest.mark.parametrize("mood", list(Mood))
def test_random_line_comes_from_mood(mood):
    rng = random.Random(3)
    for _ in range(20):
        assert random_line(mood, rng) in lines_for(mood)


def test_generate_sentence_has_no_tokens():
    rng = random.Random(42)
    for _ in range(200):
        assert "<" not in generate_sentence(rng)


def test_first_template_filled():
    assert generate_sentence(_FirstChoice(0)) == "the fast cat runs quickly."


@pytest.mark.parametrize(
    "index, expected",
    [
        (12, "you sound so fast right now"),
        (13, "im runing right now"),
        (5, "fast and fast, the cat runs quickly"),
    ],
)
def test_fixed_choices_fill_templates(index, expected):
    assert generate_sentence(_FirstChoice(index)) == expected


def test_repeated_token_uses_same_word():
    rng = random.Random(11)
    for _ in range(50):
        words = generate_sentence(_SeededTemplate(rng, 9)).split()
        assert words[1] == words[2]
        assert words[1] in NOUNS
        assert words[0] in ADJECTIVES


def test_words_come_from_lists():
    rng = random.Random(5)
    words = set(NOUNS) | set(ADJECTIVES) | set(VERBS) | set(ADVERBS)
    sentence = generate_sentence(_SeededTemplate(rng, 2))
    parts = sentence.rstrip(".").split()
    assert parts[0] == "the"
    assert parts[1] in words
    assert parts[2] in ADVERBS
    assert parts[3][:-1] in VERBS