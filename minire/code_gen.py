from . import syntax
from .instruction import *
from functools import singledispatch

Step = Atom | Repeat | Final

def compile(constructions: list[syntax.Construction]) -> list[Instruction]:
    code = []
    for val in constructions:
        code += compile_helper(val)

    # Stick a final at the end to represent a successful match.
    code.append(Final())
    return code

@singledispatch
def compile_helper(val) -> list[Instruction]:
    raise AssertionError(f"Unexpected type for val {type(val).__name__}")

@compile_helper.register
def _(val: syntax.Literal) -> list[Instruction]:
    return [Literal(val.val)]

@compile_helper.register
def _(_: syntax.WildCard) -> list[Instruction]:
    return [Any()]

@compile_helper.register
def _(val: syntax.Option) -> list[Instruction]:
    """
        AtMost 1
        code for val
    """
    return [AtMost(1)] + compile_helper(val.val)

@compile_helper.register
def _(val: syntax.Some) -> list[Instruction]:
    """
        AtLeast 1
        code for val
    """
    return [AtLeast(1)] + compile_helper(val.val)

@compile_helper.register
def _(val: syntax.Star) -> list[Instruction]:
    """
        AtLeast 0
        code for val
    """
    return [AtLeast(0)] + compile_helper(val.val)

def link(code: list[Instruction]) -> tuple[Step, ...]:
    '''
    Fuse every quantifier with the atom after it into a single Repeat step.
    '''
    steps: list[Step] = []
    index = 0
    while index < len(code):
        inst = code[index]
        if isinstance(inst, (AtLeast, AtMost)):
            assert index + 1 < len(code) and isinstance(code[index+1], Atom), \
                f"{inst} at {index} does not govern an atom"
            steps.append(Repeat(inst, code[index+1]))
            index += 1
        else:
            steps.append(inst)
        index += 1

    assert steps and isinstance(steps[-1], Final), "Code must end with Final"
    return tuple(steps)
