from dataclasses import dataclass

"""
Instructions:
- Any
- Literal <char>
- AtLeast <count>
- AtMost <count>
- Final

A quantifier (AtLeast/AtMost) always comes directly before the single atom (Any/Literal) it
governs. Linking fuses the pair into one Repeat step for execution.
"""

class Instruction:
    """
    Base class for regex instructions
    """
    def code(self) -> str:
        raise AssertionError("Base class should not be used")

class Atom(Instruction):
    """
    An instruction that matches exactly one character.
    """
    def accepts(self, c: str) -> bool:
        raise AssertionError("Base class should not be used")

@dataclass(frozen=True)
class Any(Atom):
    """
    Matches any single character, ex: `.`
    """
    def accepts(self, c: str) -> bool:
        return True

    def code(self) -> str:
        return "Any"

@dataclass(frozen=True)
class Literal(Atom):
    """
    Matches a single character equal to `char`.
    """
    char: str

    def accepts(self, c: str) -> bool:
        return c == self.char

    def code(self) -> str:
        return f"Literal {self.char}"

@dataclass(frozen=True)
class AtLeast(Instruction):
    """
    The following atom must match at least `count` consecutive times. Counting is greedy and
    unbounded.
    """
    count: int

    def satisfied(self, n: int) -> bool:
        return n >= self.count

    def limit(self) -> int | None:
        return None

    def code(self) -> str:
        return f"AtLeast {self.count}"

@dataclass(frozen=True)
class AtMost(Instruction):
    """
    The following atom may match at most `count` consecutive times. Counting is greedy and stops
    at `count`, so the quantifier itself never fails.
    """
    count: int

    def satisfied(self, n: int) -> bool:
        return True

    def limit(self) -> int | None:
        return self.count

    def code(self) -> str:
        return f"AtMost {self.count}"

@dataclass(frozen=True)
class Final(Instruction):
    """
    Execution reaching this point means the pattern matched.
    """
    def code(self) -> str:
        return "Final"

Quantifier = AtLeast | AtMost

@dataclass(frozen=True)
class Repeat(Instruction):
    """
    A quantifier linked with the atom it governs. Only produced by linking, never by code
    generation.
    """
    quantifier: Quantifier
    atom: Atom

    def count(self, s: str, start: int) -> int:
        '''
        Greedily count the characters of `s` from `start` that the atom accepts, stopping at the
        quantifier's limit if it has one.
        '''
        limit = self.quantifier.limit()
        n = 0
        # Index into `s` rather than slicing it, so a short count never copies the rest of the text.
        while start + n < len(s) and (limit is None or n < limit) and self.atom.accepts(s[start+n]):
            n += 1
        return n

    def code(self) -> str:
        return f"{self.quantifier.code()}\n{self.atom.code()}"
