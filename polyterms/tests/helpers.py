# (C) 2024 Irreducible Inc.

from hypothesis import strategies as st

# Small integer-valued coefficients keep float products and sums exact, so results can be compared with ==.
coefficients_strategy = st.integers(-20, 20).filter(lambda c: c != 0).map(float)
exponents_strategy = st.integers(-4, 9)


def term_lists_strategy(max_size: int = 6) -> st.SearchStrategy[list[tuple[float, int]]]:
    """Arbitrary term lists: exponents may repeat and come in any order."""
    return st.lists(st.tuples(coefficients_strategy, exponents_strategy), max_size=max_size)


def canonical_term_lists_strategy(max_size: int = 6) -> st.SearchStrategy[list[tuple[float, int]]]:
    """Term lists with unique exponents in descending order."""
    return st.lists(exponents_strategy, unique=True, max_size=max_size).flatmap(
        lambda exponents: st.tuples(*[coefficients_strategy for _ in exponents]).map(
            lambda coefficients: list(zip(coefficients, sorted(exponents, reverse=True)))
        )
    )


def to_source(terms: list[tuple[float, int]], separators: list[str] | None = None) -> str:
    """Renders terms in the bracket grammar; `separators` supplies the whitespace between groups."""
    groups = [f"[{c:g} {e}]" for c, e in terms]
    if separators is None:
        return " ".join(groups)
    return "".join(group + separators[i % len(separators)] for i, group in enumerate(groups))


@st.composite
def sources_strategy(draw: st.DrawFn, max_size: int = 6) -> tuple[list[tuple[float, int]], str]:
    """Term lists together with a grammar string for them, with random whitespace and leading text."""
    terms = draw(term_lists_strategy(max_size))
    separators = draw(st.lists(st.sampled_from([" ", "  ", "\n", "\t ", ""]), min_size=1, max_size=3))
    prefix = draw(st.sampled_from(["", "p(x) = ", "  ", "poly:"]))
    return terms, prefix + to_source(terms, separators)
