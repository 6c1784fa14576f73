#!/usr/bin/env python3
"""
Word Streak — line-based terminal Wordle with a running win streak.
Features:
- Guess a secret word of configurable length in 5 tries
- Letter feedback: green (correct spot), yellow (in the word), bare (absent)
- Correct / known / unused letter summary under the board
- Endless rounds: a win adds 1 to the score, a loss resets it to 0
- Commands: !exit=quit, !give=give up the round (reveals the word)
- Flags: -l/--length N, -w/--words FILE, -s/--seed N, --strict, --plain
"""

import argparse
import enum
import functools
import random
import sys

# ---------------------------------------------------------------------------
# Built-in word list (all lowercase, mixed lengths)
# ---------------------------------------------------------------------------
WORDS = """
a i

am an as at be by do go he hi if in is it me my no of oh on or ox so
to up us we

ant arc art bay bee cab cat cow cub cup dog elk emu fig fox gem gnu
hat hen ink jam jar jet key kit log map mud net nut oak owl pan pig
pot ram rat rug sun tea toe van web yak zip

atom bark bead bell bird boat bolt cake calm cape chip clay coal coin
cord crab deer dome door dove drum dune echo fern film fish flag foam
fork frog gate gear gift glow gold harp hawk hill horn iris jade kelp
kite knot lamp leaf lime lion loom mast mint moon moss nest note oath
opal palm pear pine plum pond rain reed ring road rope ruby sage salt
sand seal ship silk snow soap star stem swan tide toad tree tusk vine
wave wolf wool yarn zinc

about above abuse actor acute admit adopt adult after again agent
agree ahead alarm album alert alike alive allow alone along alter
among angel anger angle angry anime ankle apart apple apply arena
argue arise armor array arrow aside asset audio avoid award aware
badly baker bases basic basis beach began begin being below bench
berry birth black blade blame bland blank blast blaze bleed blend
bless blind block blood bloom blown board bonus boost bound brain
brand brave bread break breed brick bride brief bring broad broke
brown brush build bunch burst buyer cabin candy carry catch cause
chain chair chaos charm chart chase cheap check cheek chess chest
chief child china chunk claim clash class clean clear click cliff
climb cling clock clone close cloth cloud coach coast color comet
comic coral couch could count court cover crack craft crane crash crate
crazy cream crime cross crowd crown cruel crush curve cycle daily
dance dealt debug decay delay delta dense depth derby devil dirty
donor doubt draft drain drama drank drawn dream dress dried drift
drink drive drove drunk dying eager eagle early earth eight elbow
elect elite email ember empty enemy enjoy enter equal error essay
event every exact exile exist extra fable faint fairy faith false
fancy fatal fault feast fiber field fifth fifty fight final first
fixed flame flash flask flesh float flood floor flour fluid flush
flute focus force forge forth forum found frame frank fraud fresh
front frost fruit fully funny ghost giant given gland glass globe
gloom glory glove going grace grade grain grand grant grape graph
grasp grass grave great green greet grief grill grind groan gross
group grove grown guard guess guest guide guild guilt habit happy
harsh haste haven heart heavy hello hence herbs honey honor horse
hotel house human humor hurry ideal image imply index inner input
irony issue ivory jelly joint joker judge juice kayak knack kneel
knife knock known label large laser later laugh layer learn lease
least leave legal lemon level light limit linen liver local lodge
logic login loose lover lower loyal lunar lunch lying magic major
maker manor maple march match maybe mayor meant medal media melon
mercy merit metal meter midst might minor minus mixed model money
month moral motor mount mouse mouth moved movie muddy music naval
nerve never newly night noble noise north noted novel nurse nylon
occur ocean offer often olive onset opera orbit order organ other
otter ought outer owner oxide ozone paint panel panic paper party
patch pause peace pearl penny phase phone photo piano piece pilot
pinch pitch pixel place plain plane plant plate plaza plead pluck
plumb plume point porch poser posit pound power press price pride
prime print prior prism prize prone proof prose proud prove psalm
pulse punch pupil purse queen query quest queue quick quiet quote
radar radio raise rally range rapid ratio raven reach react ready
realm rebel reign relax reply rider ridge rifle right rigid rival
river robin robot rocky roger roman rouge rough round route royal
rural sadly saint salad scale scarf scene scope score sense serve
setup seven shade shaft shake shall shame shape share sharp shear
sheep sheer sheet shelf shell shift shine shirt shock shore short
shout sight sigma since sixth sixty sized skill skull slate slave
sleep slide slope small smart smell smile smoke snake solar solid
solve sorry sound south space spare spark speak speed spend spent
spice spine spite split spoke spoon sport spray squad stack staff
stage stain stake stale stall stamp stand stare stark start state
stays steam steel steep steer stern stick stiff still stock stone
stood store storm story stout stove strap straw strip stuck study
stuff style sugar suite sunny super surge swamp swear sweet swept
swift swing sword swore sworn syrup table taste teach tease tempo
tenor tense terms theft theme there thick thing think third those
three threw throw thumb tiger tight timer tired title toast today
token topic torch total touch tough towel tower toxic trace track
trade trail train trait trash treat trend trial tribe trick tried
troop trout truck truly trump trunk trust truth tulip tumor tweed
twice twist tying ultra uncle under union unity until upper upset
urban usage usual utter valid value vapor vault verse video vigor vinyl
viral virus visit vista vital vivid vocal vodka voice voter wagon waste
watch water weary weave wedge weird whale wheat wheel where which while
white whole whose width witch woman women world worry worse worst worth
would wound woven wrath write wrong wrote yacht yield young youth zebra

anchor animal basket beacon bridge bronze button cactus candle canvas
carpet castle cheese cherry circle clover cobalt copper cotton dragon
effort engine falcon forest galaxy garden ginger goblet hammer harbor
helmet insect island jacket jungle kettle ladder lagoon magnet marble
meadow mirror mitten nectar needle oyster parrot pebble pepper pickle
planet pocket puzzle rabbit ribbon rocket saddle salmon shadow silver
socket spider spirit stream summer sunset tablet thread ticket timber
tomato tunnel velvet violin walnut window winter wizard

balloon blanket cabinet captain century chimney compass crystal
diamond dolphin emerald feather giraffe harvest horizon iceberg
journey kitchen lobster machine mansion monster morning orchard
panther penguin pilgrim pyramid rainbow seagull sparrow stadium
station thunder trumpet uniform volcano weather

absolute airplane alphabet backyard baseball bathroom birthday blizzard
bookcase calendar campfire cardinal champion chestnut chipmunk clothing
cucumber daughter dinosaur dumpling elephant envelope festival firework
flamingo football fountain goldfish grateful hedgehog highland hospital
kangaroo keyboard landmark lavender lemonade magazine mandolin marathon
marigold midnight mosquito mountain mushroom notebook nutshell offshore
ornament painting pancakes peaceful pinecone platypus porridge question
railroad raincoat reindeer sailboat sandwich sapphire seashore shipyard
skeleton snowball squirrel sunlight sunshine swimming tapestry teaspoon
tortoise treasure triangle umbrella universe vacation windmill woodland
yearbook zeppelin

adventure alligator astronaut avalanche beekeeper blueberry breakfast
bumblebee butterfly carpenter chocolate cranberry crocodile detective
dragonfly evergreen fireplace grapevine happiness horseshoe hurricane
invention jellyfish labyrinth lightning limestone nightfall orchestra
pineapple porcupine raspberry scarecrow scientist snowflake spaceship
starlight submarine sunflower tangerine telephone telescope thumbnail
underwear waterfall whirlpool

accountant blackboard chandelier cheesecake cornflower earthquake
elementary fingernail friendship ingredient lighthouse motorcycle
paintbrush playground rhinoceros skateboard strawberry sweetheart
thermostat toothbrush trampoline typewriter underwater volleyball
watermelon whispering wildflower windshield woodpecker
"""

# Default word length
WORD_LENGTH = 5

# Guesses per round
MAX_GUESSES = 5

# Session commands (checked before dictionary validation)
EXIT_COMMAND = "!exit"
GIVE_UP_COMMAND = "!give"
COMMAND_PREFIX = "!"

# Filler character for empty board rows
EMPTY = "_"

# ---------------------------------------------------------------------------
# Letter markers
# ---------------------------------------------------------------------------
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"


class Mark(enum.Enum):
    """Classification of one guessed letter."""
    CORRECT = "correct"
    PRESENT = "present"
    UNCLASSIFIED = "unclassified"


# (prefix, suffix) wrapped around the character for each mark
ANSI_MARKERS = {
    Mark.CORRECT: ("\033[42m", RESET),   # green background
    Mark.PRESENT: ("\033[43m", RESET),   # yellow background
    Mark.UNCLASSIFIED: ("", ""),
}

PLAIN_MARKERS = {
    Mark.CORRECT: ("[", "]"),
    Mark.PRESENT: ("(", ")"),
    Mark.UNCLASSIFIED: ("", ""),
}


class WordleError(Exception):
    """Fatal setup problem, e.g. no words of the requested length."""


# ---------------------------------------------------------------------------
# Letters and words
# ---------------------------------------------------------------------------
@functools.total_ordering
class Letter:
    """A single character plus its classification.

    Letters compare, sort and hash on the character alone so a scored
    letter can be found among unscored ones.
    """

    __slots__ = ("_char", "_mark")

    def __init__(self, char, mark=Mark.UNCLASSIFIED):
        self._char = char
        self._mark = mark

    @property
    def char(self):
        return self._char

    @property
    def mark(self):
        return self._mark

    def with_mark(self, mark):
        return Letter(self._char, mark)

    def __eq__(self, other):
        if isinstance(other, Letter):
            return self._char == other._char
        if isinstance(other, str):
            return self._char == other
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Letter):
            return NotImplemented
        return self._char < other._char

    def __hash__(self):
        return hash(self._char)

    def __str__(self):
        return self._char

    def __repr__(self):
        return f"Letter({self._char!r}, {self._mark.name})"


@functools.total_ordering
class Word:
    """Immutable sequence of Letters; equality ignores marks."""

    __slots__ = ("_letters",)

    def __init__(self, letters=()):
        if isinstance(letters, str):
            letters = [Letter(c) for c in letters]
        self._letters = tuple(letters)

    @property
    def letters(self):
        return self._letters

    @property
    def text(self):
        return "".join(letter.char for letter in self._letters)

    @property
    def marks(self):
        return [letter.mark for letter in self._letters]

    def startswith(self, prefix):
        return self.text.startswith(prefix)

    def with_marks(self, marks):
        """Return a copy with one mark per letter."""
        marks = list(marks)
        if len(marks) != len(self._letters):
            raise ValueError(
                f"got {len(marks)} marks for a {len(self._letters)}-letter word"
            )
        return Word(l.with_mark(m) for l, m in zip(self._letters, marks))

    def all_marked(self, mark):
        return Word(l.with_mark(mark) for l in self._letters)

    def __len__(self):
        return len(self._letters)

    def __getitem__(self, index):
        return self._letters[index]

    def __iter__(self):
        return iter(self._letters)

    def __contains__(self, item):
        char = item.char if isinstance(item, Letter) else item
        return any(letter.char == char for letter in self._letters)

    def __eq__(self, other):
        if isinstance(other, Word):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.text < other.text

    def __hash__(self):
        return hash(self.text)

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Word({self.text!r})"


# ---------------------------------------------------------------------------
# Dictionary
# ---------------------------------------------------------------------------
class Dictionary:
    """Read-only list of candidate words, all of one length."""

    def __init__(self, source, word_length=WORD_LENGTH):
        self.word_length = word_length
        words = []
        seen = set()
        for raw in source:
            entry = raw.strip()
            if not entry or len(entry) != word_length or entry in seen:
                continue
            seen.add(entry)
            words.append(Word(entry))
        self._words = tuple(words)
        self._lookup = frozenset(seen)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __getitem__(self, index):
        return self._words[index]

    def __contains__(self, word):
        return self.contains(word)

    def contains(self, word):
        text = word.text if isinstance(word, Word) else word
        return text in self._lookup

    def random(self, rng=None):
        """Pick a word uniformly, with replacement."""
        if not self._words:
            raise WordleError(f"no {self.word_length}-letter words to choose from")
        return (rng or random).choice(self._words)


def load_dictionary(word_length=WORD_LENGTH, path=None):
    """Build a Dictionary from the built-in list or a word file.

    Entries are whitespace/newline separated. Raises WordleError when
    nothing of the requested length is found, OSError if *path* cannot
    be read.
    """
    if path is None:
        source = WORDS.split()
        origin = "the built-in word list"
    else:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read().split()
        origin = path
    dictionary = Dictionary(source, word_length)
    if not len(dictionary):
        raise WordleError(f"No {word_length}-letter words found in {origin}")
    return dictionary


# ---------------------------------------------------------------------------
# Pure game logic (no terminal dependency)
# ---------------------------------------------------------------------------
def score(secret, guess, strict=False):
    """Score *guess* against *secret*.

    Returns (is_win, scored_word). By default a letter found anywhere in
    the secret is PRESENT (CORRECT on an exact position match), even when
    the secret holds fewer copies than the guess. With strict=True copies
    are counted the classic Wordle way.
    """
    if isinstance(secret, str):
        secret = Word(secret)
    if isinstance(guess, str):
        guess = Word(guess)
    if len(guess) != len(secret):
        raise ValueError(
            f"guess length ({len(guess)}) != secret length ({len(secret)})"
        )

    if guess == secret:
        return True, secret.all_marked(Mark.CORRECT)

    if strict:
        return False, guess.with_marks(_strict_marks(secret, guess))

    marks = []
    for i, letter in enumerate(guess):
        if letter not in secret:
            marks.append(Mark.UNCLASSIFIED)
        elif secret[i] == letter:
            marks.append(Mark.CORRECT)
        else:
            marks.append(Mark.PRESENT)
    return False, guess.with_marks(marks)


def _strict_marks(secret, guess):
    marks = [Mark.UNCLASSIFIED] * len(guess)
    remaining = [letter.char for letter in secret]

    # First pass: exact positions
    for i, letter in enumerate(guess):
        if remaining[i] == letter.char:
            marks[i] = Mark.CORRECT
            remaining[i] = None

    # Second pass: misplaced, while unmatched copies are left
    for i, letter in enumerate(guess):
        if marks[i] is Mark.CORRECT:
            continue
        if letter.char in remaining:
            marks[i] = Mark.PRESENT
            remaining[remaining.index(letter.char)] = None

    return marks


class RoundBuffer:
    """Scored guesses of the current round, the attempt counter and score."""

    def __init__(self, word_length=WORD_LENGTH, max_guesses=MAX_GUESSES):
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.words = []
        self.score = 0
        self.guess = 0

    def set_score(self, value):
        self.score = value

    def reset(self):
        """Start a new round. The score is left alone."""
        self.words = []
        self.guess = 0

    def all_some(self):
        return len(self.words) >= self.max_guesses

    def all_none(self):
        return not self.words

    def next(self):
        """Index of the next free slot, or max_guesses when full."""
        if self.all_some():
            return self.max_guesses
        return len(self.words)

    def add(self, word):
        """Store a scored guess; returns True once the buffer is full.

        Every call counts as an attempt, including calls on a full buffer,
        which store nothing.
        """
        self.guess += 1
        if self.all_some():
            return True

        slot = self.next()
        assert slot < self.max_guesses, f"slot {slot} out of range"
        self.words.append(word)
        return self.all_some()

    def gather_kcu(self):
        """Return (correct, known, unused) letters seen so far this round.

        Each list keeps first-seen order and holds a character at most
        once, but a character can sit in several lists.
        """
        correct, known, unused = [], [], []
        buckets = {
            Mark.CORRECT: correct,
            Mark.PRESENT: known,
            Mark.UNCLASSIFIED: unused,
        }
        for word in self.words:
            for letter in word:
                bucket = buckets[letter.mark]
                if letter not in bucket:
                    bucket.append(letter)
        return correct, known, unused


# ---------------------------------------------------------------------------
# Drawing helpers
# ---------------------------------------------------------------------------
def format_letter(letter, markers=ANSI_MARKERS):
    prefix, suffix = markers[letter.mark]
    return f"{prefix}{letter.char}{suffix}"


def format_word(word, markers=ANSI_MARKERS):
    return "".join(format_letter(letter, markers) for letter in word)


def format_letters(letters, markers=ANSI_MARKERS):
    """Join a letter bucket; an empty bucket renders as a tab."""
    if not letters:
        return "\t"
    return "".join(format_letter(letter, markers) for letter in letters)


def render_board(buffer, markers=ANSI_MARKERS):
    """Render the guess rows with the score on the first one.

    A fresh 5-letter board with score 0:

        "\\n\\t_____\\tscore: 0\\n\\t_____\\n\\t_____\\n\\t_____\\n\\t_____\\n"
    """
    empty = EMPTY * buffer.word_length
    out = "\n"
    for row in range(buffer.max_guesses):
        if row < len(buffer.words):
            cell = format_word(buffer.words[row], markers)
        else:
            cell = empty
        if row == 0:
            out += f"\t{cell}\tscore: {buffer.score}\n"
        else:
            out += f"\t{cell}\n"
    return out


def render_letter_sets(buffer, markers=ANSI_MARKERS):
    correct, known, unused = buffer.gather_kcu()
    return (f"correct: {format_letters(correct, markers)}\n"
            f"known:\t{format_letters(known, markers)}\n"
            f"unused:\t{format_letters(unused, markers)}\n")


# ---------------------------------------------------------------------------
# Terminal
# ---------------------------------------------------------------------------
class Terminal:
    """Blocking line input and flushed output."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self):
        """Return the next line without its newline, or None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self):
        self.write(CLEAR_SCREEN)


# ---------------------------------------------------------------------------
# Round engine
# ---------------------------------------------------------------------------
class RoundState(enum.Enum):
    AWAITING_GUESS = "awaiting_guess"
    WON = "won"
    LOST = "lost"
    EXITING = "exiting"


class RoundEngine:
    """Runs rounds until the player exits.

    The secret of each round is drawn from *dictionary* with *rng*, a
    random.Random instance (a fresh unseeded one when omitted).
    """

    def __init__(self, dictionary, terminal=None, rng=None, strict=False,
                 markers=ANSI_MARKERS, max_guesses=MAX_GUESSES):
        self.dictionary = dictionary
        self.word_length = dictionary.word_length
        self.terminal = terminal or Terminal()
        self.rng = rng or random.Random()
        self.strict = strict
        self.markers = markers
        self.max_guesses = max_guesses
        self.buffer = RoundBuffer(self.word_length, max_guesses)
        self.secret = None
        self.state = RoundState.AWAITING_GUESS

    def start(self):
        """Play rounds back to back; returns when the player exits."""
        while True:
            self.state = self.play_round()
            if self.state is RoundState.EXITING:
                return
            if not self.finish_round():
                self.state = RoundState.EXITING
                return

    def play_round(self, secret=None):
        """Play one round and return WON, LOST or EXITING."""
        self.secret = secret if secret is not None else self.dictionary.random(self.rng)
        self.state = RoundState.AWAITING_GUESS

        while self.state is RoundState.AWAITING_GUESS:
            self.write_board()
            guess = self.read_guess()
            found = False

            if guess is None or guess == EXIT_COMMAND:
                return RoundState.EXITING
            elif guess == GIVE_UP_COMMAND:
                self.buffer.guess = self.max_guesses
            else:
                found, scored = score(self.secret, guess, self.strict)
                self.buffer.add(scored)

            if found:
                self.state = RoundState.WON
            elif self.buffer.guess >= self.max_guesses:
                self.state = RoundState.LOST

        return self.state

    def finish_round(self):
        """Show the result, update the score and wait for Enter.

        Returns False if input ended while waiting.
        """
        self.write_board()
        if self.state is RoundState.WON:
            self.buffer.set_score(self.buffer.score + 1)
        else:
            self.buffer.set_score(0)
            self.write_secret()
        self.buffer.reset()
        return self.wait_for_enter()

    def read_guess(self):
        """Read until a command or an acceptable guess comes in.

        Returns the command string, a Word, or None at end of input.
        Rejected input redraws the board and does not count as a guess.
        """
        while True:
            line = self.terminal.read_line()
            if line is None:
                return None
            text = line.strip()
            if text in (EXIT_COMMAND, GIVE_UP_COMMAND):
                return text
            if self.is_valid_guess(text):
                return Word(text)
            self.write_board()

    def is_valid_guess(self, text):
        return (bool(text)
                and not text.startswith(COMMAND_PREFIX)
                and len(text) == self.word_length
                and self.dictionary.contains(text))

    def write_board(self):
        self.terminal.clear()
        self.terminal.write(render_board(self.buffer, self.markers)
                            + render_letter_sets(self.buffer, self.markers)
                            + "\n> ")

    def write_secret(self):
        self.terminal.write(f"\ncorrect word: {self.secret}\n")

    def wait_for_enter(self):
        return self.terminal.read_line() is not None


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------
def parse_length(value):
    """Word length from the command line; anything unusable means 5."""
    try:
        length = int(value)
    except (TypeError, ValueError):
        return WORD_LENGTH
    return length if length > 0 else WORD_LENGTH


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wordstreak",
        description="Terminal Wordle with a running win streak. "
                    f"Type {EXIT_COMMAND} to quit, {GIVE_UP_COMMAND} to give up a round.",
    )
    parser.add_argument("-l", "--length", nargs="?", default=str(WORD_LENGTH),
                        const=str(WORD_LENGTH),
                        help="word length (default: %(default)s)")
    parser.add_argument("-w", "--words", metavar="FILE",
                        help="word list file, one word per line")
    parser.add_argument("-s", "--seed", type=int,
                        help="seed for secret word selection")
    parser.add_argument("--strict", action="store_true",
                        help="count repeated letters like classic Wordle")
    parser.add_argument("--plain", action="store_true",
                        help="mark letters as [x]/(x) instead of colors")
    return parser


def main(argv=None, terminal=None):
    """Run a session; returns the process exit code."""
    args = build_parser().parse_args(argv)
    word_length = parse_length(args.length)
    try:
        dictionary = load_dictionary(word_length, args.words)
        engine = RoundEngine(
            dictionary,
            terminal=terminal,
            rng=random.Random(args.seed),
            strict=args.strict,
            markers=PLAIN_MARKERS if args.plain else ANSI_MARKERS,
        )
        engine.start()
    except (OSError, UnicodeDecodeError, WordleError) as e:
        print(f"wordstreak: {e}", file=sys.stderr)
        return 1
    return 0


def cli():
    try:
        code = main()
    except KeyboardInterrupt:
        code = 0
    if code == 0:
        print("\nThanks for playing!")
    sys.exit(code)


if __name__ == "__main__":
    cli()
