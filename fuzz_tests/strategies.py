from dataclasses import dataclass

import hypothesis.strategies as st


@dataclass(frozen=True, slots=True)
class Item:
    id: int
    sub: int

    def hash_code(self) -> int:
        # Drawn from a small range so that chains are long
        return self.id

    def equals(self, other: object) -> bool:
        if not isinstance(other, Item):
            return False
        return self.id == other.id and self.sub == other.sub


items = st.builds(
    Item, id=st.integers(min_value=-3, max_value=3), sub=st.integers(min_value=0, max_value=3)
)


@st.composite
def operations(draw, max_size=50) -> list[tuple[str, Item]]:
    return draw(
        st.lists(st.tuples(st.sampled_from(["add", "remove"]), items), max_size=max_size)
    )
