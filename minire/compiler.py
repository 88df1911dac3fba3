from . import parser, code_gen, runner
from .instruction import Instruction

from dataclasses import dataclass, field
import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Pattern:
    '''
    A compiled regex. Immutable, so one instance can be matched against any number of strings,
    from any number of threads.
    '''
    source: str
    instructions: tuple[Instruction, ...]
    steps: tuple[code_gen.Step, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'steps', code_gen.link(list(self.instructions)))

    def run(self, s: str) -> tuple[int, int] | None:
        '''
        Start offset and length of the leftmost match in `s`, or None.
        '''
        return runner.run(self.steps, s)

    def contains_match(self, s: str) -> bool:
        return self.run(s) is not None

    def search(self, s: str) -> str | None:
        return runner.search(s, self.steps)

    def replace_first(self, s: str, replacement: str) -> str | None:
        '''
        Replace the leftmost match in `s` with `replacement`, inserted as is. Returns None if there
        is nothing to replace.
        '''
        found = self.run(s)
        if found is None:
            return None
        start, length = found
        return s[:start] + replacement + s[start+length:]

def compile_regex(regex: str) -> Pattern:
    code = code_gen.compile(parser.parse(regex))
    logger.debug("Compiled %r into %d instructions", regex, len(code))
    return Pattern(regex, tuple(code))

def compile_wrapper(regex: str) -> str:
    '''
    Compile a regex from its string representation to "assembly code"
    '''
    pattern = compile_regex(regex)
    code_text = '\n'.join(map(lambda step: step.code(), pattern.steps))
    return f"# regex: {regex}\n" + code_text
