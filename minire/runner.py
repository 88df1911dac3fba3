from . import instruction as inst
from .code_gen import Step

from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# Outcomes of a single scan attempt.

@dataclass(frozen=True)
class Done:
    """
    The Final instruction was reached after consuming `length` characters.
    """
    length: int

@dataclass(frozen=True)
class Fail:
    """
    Some instruction did not match, so the attempt from the current anchor is invalid.
    """

@dataclass(frozen=True)
class Stay:
    """
    A quantifier legally matched zero times `offset` characters into the attempt. Scanning resumes
    there with `pc`, without consuming the character under the cursor.
    """
    offset: int
    pc: int
    consumed: int

StepResult = Done | Fail | Stay

def search(s: str, program: tuple[Step, ...]) -> str | None:
    found = run(program, s)
    if found is None:
        return None
    start, length = found
    return s[start:start+length]

def run(program: tuple[Step, ...], s: str) -> tuple[int, int] | None:
    '''
    Find the leftmost substring of `s` matched by `program`. Returns its start offset and length,
    or None if there is no match anywhere.

    There is no backtracking: every quantifier consumes as much as it can, and a failed attempt
    restarts from scratch one character later. Each attempt only looks at the characters its steps
    actually examine, but a repeat that runs to the end of `s` at every anchor (`a*b` against a
    long run of `a`) still makes the worst case quadratic in len(s).
    '''
    anchor = 0
    sc = 0
    pc = 0
    consumed = 0

    # Anchors run up to and including len(s) so that patterns matching the empty string match at
    # the end of the input too.
    while anchor <= len(s):
        result = execution_step(program, s, pc, sc, consumed)
        if isinstance(result, Done):
            logger.debug("Matched %r at %d (length %d)", s, anchor, result.length)
            return (anchor, result.length)
        elif isinstance(result, Stay):
            sc += result.offset
            pc = result.pc
            consumed = result.consumed
        elif isinstance(result, Fail):
            anchor += 1
            sc = anchor
            pc = 0
            consumed = 0
        else:
            raise AssertionError(f"{result} is not a recognized step result!")

    logger.debug("No match in %r", s)
    return None

def execution_step(program: tuple[Step, ...], s: str, pc: int, sc: int, consumed: int) -> StepResult:
    '''
    Run `program` from `pc` against `s` from `sc` until it finishes, fails or a quantifier
    matches nothing.
    '''
    start = sc
    while True:
        i = program[pc]
        if isinstance(i, inst.Final):
            return Done(consumed)
        elif isinstance(i, inst.Repeat):
            count = i.count(s, sc)
            if not i.quantifier.satisfied(count):
                return Fail()
            pc += 1
            if count == 0:
                return Stay(sc - start, pc, consumed)
            sc += count
            consumed += count
        elif isinstance(i, inst.Atom):
            if sc >= len(s) or not i.accepts(s[sc]):
                return Fail()
            sc += 1
            consumed += 1
            pc += 1
        else:
            raise AssertionError(f"{i} is not a recognized instruction!")
