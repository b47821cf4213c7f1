#!/usr/bin/env python3
"""Suggest memorable passwords built from three letter words, marks and numbers."""

import argparse
import os
import platform
import random
import sys
from importlib import metadata
from typing import List, Mapping, Optional, Sequence, Tuple


__version__ = "0.0.1"

DIST_NAME = "qpass"
COPYRIGHT_NAME = "Simon Rowe"
COPYRIGHT_YEAR = "2023"
SOURCE_URL = "https://github.com/wiremoons/qpass/"

WORD_COUNT_ENV = "QPASS_WORDS"
DEFAULT_WORD_COUNT = 3
MIN_WORD_COUNT = 1
MAX_WORD_COUNT = 10
CANDIDATE_LINES = 3
NUMBER_LIMIT = 100
INTRO_LINE = "Suggested passwords:"

NUMBER_TONE = 39
MARK_TONE = 208

MARKS: Tuple[str, ...] = (
    "!", "#", "$", "%", "&", "*", "+", "-",
    "=", "?", "@", "^", "_", "~", ".", ":",
)

WORDS: Tuple[str, ...] = (
    "ace", "act", "add", "ado", "age", "aid", "aim", "air", "ale", "all",
    "amp", "and", "ant", "any", "ape", "apt", "arc", "are", "ark", "arm",
    "art", "ash", "ask", "ate", "awe", "axe", "bad", "bag", "ban", "bar",
    "bat", "bay", "bed", "bee", "beg", "bet", "bib", "bid", "big", "bin",
    "bit", "boa", "bob", "bog", "boo", "bow", "box", "boy", "bud", "bug",
    "bun", "bus", "but", "buy", "bye", "cab", "cam", "can", "cap", "car",
    "cat", "cob", "cod", "cog", "con", "coo", "cop", "cot", "cow", "coy",
    "cry", "cub", "cue", "cup", "cut", "dab", "dad", "dam", "day", "den",
    "dew", "did", "dig", "dim", "din", "dip", "doe", "dog", "don", "dot",
    "dry", "dub", "due", "dug", "dye", "ear", "eat", "ebb", "eel", "egg",
    "ego", "elf", "elk", "elm", "emu", "end", "era", "eve", "ewe", "eye",
    "fab", "fad", "fan", "far", "fat", "fax", "fed", "fee", "few", "fig",
    "fin", "fir", "fit", "fix", "flu", "fly", "foe", "fog", "for", "fox",
    "fry", "fun", "fur", "gag", "gal", "gap", "gas", "gel", "gem", "get",
    "gig", "gin", "gnu", "goo", "got", "gum", "gun", "gut", "guy", "gym",
    "had", "ham", "has", "hat", "hay", "hem", "hen", "her", "hew", "hex",
    "hey", "hid", "him", "hip", "his", "hit", "hob", "hog", "hop", "hot",
    "how", "hub", "hue", "hug", "hum", "hut", "ice", "icy", "ill", "imp",
    "ink", "inn", "ion", "ire", "irk", "ivy", "jab", "jam", "jar", "jaw",
    "jay", "jet", "jig", "job", "jog", "jot", "joy", "jug", "keg", "ken",
    "key", "kid", "kin", "kit", "lab", "lad", "lag", "lap", "law", "lay",
    "led", "leg", "let", "lid", "lip", "lit", "log", "lot", "low", "lug",
    "mad", "man", "map", "mat", "maw", "may", "men", "met", "mix", "mob",
    "mod", "mop", "mow", "mud", "mug", "mum", "nab", "nag", "nap", "net",
    "new", "nib", "nil", "nip", "nod", "nor", "not", "now", "nun", "nut",
    "oak", "oar", "oat", "odd", "ode", "off", "oil", "old", "one", "opt",
    "orb", "ore", "our", "out", "owl", "own", "pad", "pal", "pan", "pat",
    "paw", "pay", "pea", "peg", "pen", "pep", "pet", "pew", "pie", "pig",
    "pin", "pit", "ply", "pod", "pop", "pot", "pro", "pry", "pub", "pug",
    "pun", "pup", "put", "rag", "ram", "ran", "rap", "rat", "raw", "ray",
    "red", "rib", "rid", "rig", "rim", "rip", "rob", "rod", "roe", "rot",
    "row", "rub", "rug", "rum", "run", "rut", "rye", "sad", "sag", "sap",
    "sat", "saw", "say", "sea", "see", "set", "sew", "shy", "sip", "sir",
    "sit", "six", "ski", "sky", "sly", "sob", "sod", "son", "sow", "soy",
    "spa", "spy", "sub", "sum", "sun", "tab", "tag", "tan", "tap", "tar",
    "tax", "tea", "ten", "the", "tie", "tin", "tip", "toe", "ton", "too",
    "top", "tow", "toy", "try", "tub", "tug", "two", "urn", "use", "van",
    "vat", "vet", "via", "vow", "wag", "war", "was", "wax", "way", "web",
    "wed", "wet", "who", "why", "wig", "win", "wit", "woe", "wok", "won",
    "woo", "wow", "yak", "yam", "yap", "yaw", "yea", "yes", "yet", "yew",
    "you", "zap", "zen", "zip", "zoo",
)

_RNG = random.Random()


class Config:
    def __init__(self, word_count: int = DEFAULT_WORD_COUNT, color: bool = True) -> None:
        self.word_count = word_count
        self.color = color


class PasswordParts:
    """The pieces drawn for one round of suggestions, and the three styles built from them."""

    def __init__(
        self,
        words: List[str],
        title_words: List[str],
        mixed_words: List[str],
        numbers: Tuple[str, str],
        marks: Tuple[str, str],
    ) -> None:
        self.words = words
        self.title_words = title_words
        self.mixed_words = mixed_words
        self.numbers = numbers
        self.marks = marks

    @property
    def lowercase(self) -> str:
        return "".join(self.words)

    @property
    def title_case(self) -> str:
        return "".join(self.title_words)

    @property
    def mixed_case(self) -> str:
        return "".join(self.mixed_words)

    def styles(self, color: bool = False) -> Tuple[str, str, str]:
        num1, num2 = (paint_number(n, color) for n in self.numbers)
        mark1, mark2 = (paint_mark(m, color) for m in self.marks)
        return (
            num1 + mark1 + self.lowercase + mark2 + num2,
            self.title_case + mark1 + num1 + num2,
            mark1 + num1 + self.mixed_case + mark2 + num2,
        )


def paint_code(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"\033[{code}m{text}\033[0m"


def paint(text: str, tone: int, color: bool) -> str:
    return paint_code(text, f"38;5;{tone}", color)


def paint_number(text: str, color: bool) -> str:
    return paint(text, NUMBER_TONE, color)


def paint_mark(text: str, color: bool) -> str:
    return paint(text, MARK_TONE, color)


def bold(text: str, color: bool) -> str:
    return paint_code(text, "1", color)


def random_word(rng: Optional[random.Random] = None) -> str:
    rng = rng or _RNG
    return WORDS[rng.randrange(len(WORDS))]


def random_mark(rng: Optional[random.Random] = None) -> str:
    rng = rng or _RNG
    return MARKS[rng.randrange(len(MARKS))]


def random_number(rng: Optional[random.Random] = None) -> int:
    rng = rng or _RNG
    return rng.randrange(NUMBER_LIMIT)


def random_case_string(value: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or _RNG
    return "".join(
        ch.upper() if rng.randrange(NUMBER_LIMIT) % 2 else ch.lower() for ch in value
    )


def title_case_first_letter(value: str) -> str:
    if not value:
        return value
    return value[0].upper() + value[1:]


def pad_with_leading_zero(number: int) -> str:
    return f"{number:02d}"


def assemble(word_count: int = DEFAULT_WORD_COUNT, rng: Optional[random.Random] = None) -> PasswordParts:
    if word_count < 1:
        raise ValueError(f"word count must be at least 1, got {word_count}")
    rng = rng or _RNG
    words: List[str] = []
    title_words: List[str] = []
    mixed_words: List[str] = []
    for _ in range(word_count):
        word = random_word(rng)
        words.append(word)
        title_words.append(title_case_first_letter(word))
        mixed_words.append(random_case_string(word, rng))
    numbers = (
        pad_with_leading_zero(random_number(rng)),
        pad_with_leading_zero(random_number(rng)),
    )
    marks = (random_mark(rng), random_mark(rng))
    return PasswordParts(words, title_words, mixed_words, numbers, marks)


def format_candidates(parts: PasswordParts, color: bool) -> str:
    return "\t".join(parts.styles(color))


def parse_word_count(raw: str) -> int:
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isdigit() and digits.isascii()):
        raise ValueError(f"{WORD_COUNT_ENV} must be a whole number, got {raw!r}")
    return int(text)


def resolve_word_count(environ: Optional[Mapping[str, str]] = None) -> int:
    environ = os.environ if environ is None else environ
    raw = environ.get(WORD_COUNT_ENV, "")
    if not raw.strip():
        return DEFAULT_WORD_COUNT
    try:
        count = parse_word_count(raw)
    except ValueError as exc:
        print(f"Warning: {exc}; using {DEFAULT_WORD_COUNT}.", file=sys.stderr)
        return DEFAULT_WORD_COUNT
    clamped = min(max(count, MIN_WORD_COUNT), MAX_WORD_COUNT)
    if clamped != count:
        print(
            f"Warning: {WORD_COUNT_ENV}={count} is outside {MIN_WORD_COUNT}-{MAX_WORD_COUNT}; using {clamped}.",
            file=sys.stderr,
        )
    return clamped


def color_enabled(monochrome: bool, environ: Optional[Mapping[str, str]] = None) -> bool:
    environ = os.environ if environ is None else environ
    return not monochrome and not environ.get("NO_COLOR")


def load_config(args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> Config:
    return Config(
        word_count=resolve_word_count(environ),
        color=color_enabled(args.monochrome, environ),
    )


def get_app_name() -> str:
    return os.path.basename(sys.argv[0]) or DIST_NAME


def get_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return __version__


def print_version_info() -> None:
    print(f"\n'{get_app_name()}' is version {get_version()}, copyright (c) {COPYRIGHT_YEAR} {COPYRIGHT_NAME}.")
    print(
        f"Running on {platform.python_implementation()} {platform.python_version()} "
        f"on {platform.system() or 'unknown OS'} {platform.machine()}."
    )
    print(f"Source code and MIT licence: {SOURCE_URL}\n")


def print_about(config: Config) -> None:
    words = config.word_count
    rounds = CANDIDATE_LINES
    marks = " ".join(MARKS)
    print(f"""
How {get_app_name()} builds its suggestions:

Each round draws {words} word(s) at random from a list of {len(WORDS)} three letter words,
two numbers between 00 and 99, and two marks from a set of {len(MARKS)} marks:

    {marks}

The same draw is laid out three ways, separated by tabs:

    1. number + mark + lowercase words + mark + number
    2. Title Case Words + mark + number + number
    3. mark + number + rAnDoM cAsE words + mark + number

{rounds} rounds are printed per run. Set {WORD_COUNT_ENV} to use between {MIN_WORD_COUNT} and
{MAX_WORD_COUNT} words per password (currently {words}). Set NO_COLOR or use --monochrome
to turn off highlighting of numbers and marks.

Suggestions use a general purpose random generator and are meant to be easy to
remember; they are not a replacement for a password manager.
""")


def build_parser(color: bool = True) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=get_app_name(),
        description="Provide a choice of passwords based on three letter words and different marks.",
        epilog=(
            f"Environment: {WORD_COUNT_ENV} sets the number of words per password "
            f"(default: {DEFAULT_WORD_COUNT}, range {MIN_WORD_COUNT}-{MAX_WORD_COUNT}); "
            "NO_COLOR disables colored output."
        ),
        usage=f"{bold(get_app_name(), color)} [switches]",
        add_help=True,
    )
    parser.add_argument("-v", "--version", action="store_true", help="Display program version.")
    parser.add_argument("-a", "--about", action="store_true", help="Explain how passwords are generated.")
    parser.add_argument("-m", "--monochrome", action="store_true", help="Disable colored output.")
    return parser


def requests_monochrome(argv: Sequence[str]) -> bool:
    """Spot -m/--monochrome ahead of parsing so help and usage errors honour it.

    Mirrors argparse matching: unambiguous long prefixes (``--mono``) and
    bundled short switches (``-mh``) both count.
    """
    for arg in argv:
        if arg == "--":
            break
        if arg.startswith("--"):
            if len(arg) > 2 and "--monochrome".startswith(arg):
                return True
        elif arg.startswith("-") and "m" in arg[1:] and set(arg[1:]) <= set("hvam"):
            return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser(color=color_enabled(requests_monochrome(argv)))
    args = parser.parse_args(argv)

    if args.version:
        print_version_info()
        sys.exit(0)

    config = load_config(args)

    if args.about:
        print_about(config)
        sys.exit(0)

    print(INTRO_LINE)
    for _ in range(CANDIDATE_LINES):
        print(format_candidates(assemble(config.word_count), config.color))


if __name__ == "__main__":
    main()
