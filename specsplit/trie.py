"""Licensed under GPLv3, see https://www.gnu.org/licenses/"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Final


# marks that some spec name ends at the parent node,
# so "foo" and "foo bar" diverge right after "foo":
TERMINAL_WORD: "Final" = ""


class WordTrieNode:

    __slots__ = ("children", "word")

    def __init__(self, word: str) -> None:
        self.word = word
        self.children: dict[str, WordTrieNode] = {}

    def get_or_add_child(self, word: str) -> "WordTrieNode":
        child = self.children.get(word)
        if child is None:
            child = self.children[word] = WordTrieNode(word)
        return child

    def single_child(self) -> "WordTrieNode | None":
        if len(self.children) != 1:
            return None
        return next(iter(self.children.values()))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.word!r}: {sorted(self.children)}>"


class WordTrie:

    def __init__(self) -> None:
        self.root = WordTrieNode(TERMINAL_WORD)

    def push(self, spec: str) -> None:
        words = spec.split()
        if not words:
            return
        node = self.root
        for word in words:
            node = node.get_or_add_child(word)
        node.get_or_add_child(TERMINAL_WORD)

    def minimal_word_prefixes(self) -> list[str]:
        """
        Walk down from each first word while there is no branching.

        The words collected until the first node with several children
        (or a leaf) form the shortest prefix which still doesn't match
        specs from other branches.
        """
        prefixes = []
        for first_node in self.root.children.values():
            words = [first_node.word]
            node = first_node
            while (child := node.single_child()) is not None:
                node = child
                if node.word != TERMINAL_WORD:
                    words.append(node.word)
            prefixes.append(" ".join(words))
        return prefixes


def find_minimal_word_prefixes(specs: "Iterable[str]") -> set[str]:
    trie = WordTrie()
    for spec in specs:
        trie.push(spec)
    return set(trie.minimal_word_prefixes())
