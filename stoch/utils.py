def extract_kwargs(fn, kwargs):
    """
    Return only those kwargs that name a parameter of `fn` (unwrapping `functools.partial`)
    """
    if hasattr(fn, 'func'):
        fn = fn.func
    code = fn.__code__
    names = code.co_varnames[:code.co_argcount + code.co_kwonlyargcount]
    return {k: v for k, v in kwargs.items() if k in names and k != "self"}


def complement(input: dict, comparison: dict) -> dict:
    """Entries of `input` whose keys are missing from `comparison`"""
    if not isinstance(input, dict) or not isinstance(comparison, dict):
        raise TypeError("`input` and `comparison` types must be dict!")
    return {k: v for k, v in input.items() if k not in comparison}


def cprint(text: str, condition: bool=True):
    if condition:
        print(text)


def normalize_name(name: str) -> str:
    """Map display names like `Single Bit Flip` or `Geometric` onto registry keys (`single_bit_flip`, `geometric`)"""
    return "_".join(str(name).strip().lower().replace("-", " ").split())
