from dataclasses import dataclass

#region types

class Construction:
    '''
    Base type for all regular expression grammar constructions.
    '''

@dataclass(frozen=True)
class Literal(Construction):
    '''
    A single character literal to match.
    '''
    val: str

@dataclass(frozen=True)
class WildCard(Construction):
    '''
    Matches any single character, ex: `.`
    '''

@dataclass(frozen=True)
class Option(Construction):
    '''
    Matches zero or one occurrences, ex: `a?`
    '''
    val: Construction

@dataclass(frozen=True)
class Some(Construction):
    '''
    Matches one or more occurrences, ex: `a+`
    '''
    val: Construction

@dataclass(frozen=True)
class Star(Construction):
    '''
    Matches zero or more occurrences, ex: `a*`
    '''
    val: Construction

#endregion

quantifiers = {'?': Option, '+': Some, '*': Star}
