"""
Suffix trie / suffix tree over an arbitrary text.

Nodes live in a flat arena and refer to their children by arena id. Each
node stores the label of the edge leading into it, and its parent maps the
first symbol of that label to the child id. Sibling labels always start with
distinct symbols, so ordering children by that first symbol is the same as
ordering them by full label.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from strmatch.constants.constants import SENTINEL, UNSET_INDEX
from strmatch.models.match import MatchResult

logger = logging.getLogger(__name__)


@dataclass
class Node:
    label:      str = ""                                            # edge label into this node ("" for the root)
    index:      int = UNSET_INDEX                                   # suffix start offset, UNSET_INDEX if internal
    children:   Dict[str, int] = field(default_factory=dict)        # first symbol of child label -> arena id

    def is_leaf(self) -> bool:
        return not self.children


class SuffixTree:
    """
    Starts out as a suffix trie (one symbol per edge). trie_to_tree()
    turns it into a suffix tree in place by merging non-branching chains.

    insert() and trie_to_tree() mutate the structure; pattern_match(),
    height() and in_lex_order() only read it.
    """
    def __init__(self):
        self.nodes: List[Node] = []
        self.root: Optional[int] = None
        self.coalesced = False
        self._inserted = 0

    @classmethod
    def build(cls, text: str, sentinel: str = SENTINEL) -> "SuffixTree":
        """Insert text[i:] + sentinel with index i for every i in [0, len(text)]."""
        tree = cls()
        for i in range(len(text) + 1):
            tree.insert(text[i:] + sentinel, i)
        logger.debug("Built suffix trie over %d symbols (%d nodes)", len(text), len(tree.nodes))
        return tree

    def _new_node(self, label: str, index: int = UNSET_INDEX) -> int:
        self.nodes.append(Node(label=label, index=index))
        return len(self.nodes) - 1

    def clear(self):
        self.nodes = []
        self.root = None
        self.coalesced = False
        self._inserted = 0

    def insert(self, s: str, i: int):
        """
        Add the path spelling s and store i at its end.

        Missing paths are created one symbol per edge while the structure is
        still a trie, and as a single edge once it has been coalesced.
        Multi-symbol edges are split where s diverges from them.
        """
        if self.root is None:
            self.root = self._new_node("")
        self._inserted += 1

        node = self.root
        pos = 0
        while pos < len(s):
            key = s[pos]
            child_id = self.nodes[node].children.get(key)

            # If we haven't seen this edge, fill in the rest of the branch
            if child_id is None:
                self._extend(node, s[pos:], i)
                return

            label = self.nodes[child_id].label
            common = _common_prefix_length(label, s[pos:])
            if common < len(label):
                child_id = self._split(node, child_id, common)
            node = child_id
            pos += common

        # end of the path, store our value
        self.nodes[node].index = i

    def _extend(self, parent: int, rest: str, i: int):
        if self.coalesced:
            leaf = self._new_node(rest, i)
            self.nodes[parent].children[rest[0]] = leaf
            return
        for ch in rest:
            child = self._new_node(ch)
            self.nodes[parent].children[ch] = child
            parent = child
        self.nodes[parent].index = i

    def _split(self, parent: int, child_id: int, at: int) -> int:
        child = self.nodes[child_id]
        mid = self._new_node(child.label[:at])
        child.label = child.label[at:]
        self.nodes[mid].children[child.label[0]] = child_id
        self.nodes[parent].children[self.nodes[mid].label[0]] = mid
        return mid

    def _locate(self, pattern: str) -> Optional[int]:
        """Node at or just below the end of pattern's path, None if it falls off."""
        node = self.root
        pos = 0
        while pos < len(pattern):
            child_id = self.nodes[node].children.get(pattern[pos])
            if child_id is None:
                return None
            label = self.nodes[child_id].label
            segment = pattern[pos:pos + len(label)]
            # every symbol of a merged edge has to match, not just the first
            if label[:len(segment)] != segment:
                return None
            pos += len(segment)
            node = child_id
        return node

    def pattern_match(self, pattern: str) -> MatchResult:
        if self.root is None:
            return MatchResult.not_found()

        node = self._locate(pattern)
        if node is None:
            logger.debug("No suffix path for pattern %r", pattern)
            return MatchResult.not_found()

        return MatchResult.of(self.nodes[leaf].index for leaf in self.leaves(node))

    def leaves(self, subroot: Optional[int] = None) -> List[int]:
        """Arena ids of every leaf under subroot, in lexicographic order."""
        if subroot is None:
            subroot = self.root
        if subroot is None:
            return []

        out = []
        stack = [subroot]
        while stack:
            node_id = stack.pop()
            node = self.nodes[node_id]
            if node.is_leaf():
                out.append(node_id)
                continue
            stack.extend(node.children[k] for k in sorted(node.children, reverse=True))
        return out

    def height(self) -> int:
        """Longest root-to-leaf path in edges. An empty tree has height -1."""
        if self.root is None:
            return -1
        best = 0
        stack = [(self.root, 0)]
        while stack:
            node_id, depth = stack.pop()
            best = max(best, depth)
            for child_id in self.nodes[node_id].children.values():
                stack.append((child_id, depth + 1))
        return best

    def in_lex_order(self) -> Iterator[str]:
        """Pre-order walk of edge labels, children visited in sorted order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node_id = stack.pop()
            node = self.nodes[node_id]
            if node_id != self.root:
                yield node.label
            stack.extend(node.children[k] for k in sorted(node.children, reverse=True))

    def trie_to_tree(self):
        """
        Merge every single-child node into the edge above it.

        Each node's child map is rebuilt and swapped in rather than edited
        while it is iterated. Whole chains are merged before descending, so
        no non-branching node survives below the root unless it stores an
        index.
        """
        if self.root is None:
            return

        stack = [self.root]
        while stack:
            node = self.nodes[stack.pop()]
            replacement: Dict[str, int] = {}
            for key, child_id in node.children.items():
                child = self.nodes[child_id]
                label = child.label
                # a node holding an index ends the merge so the index survives
                while len(child.children) == 1 and child.index == UNSET_INDEX:
                    (child_id,) = child.children.values()
                    child = self.nodes[child_id]
                    label += child.label
                child.label = label
                replacement[key] = child_id
            node.children = replacement
            stack.extend(replacement.values())

        self.coalesced = True
        self._compact()

    def _compact(self):
        # drop nodes orphaned by trie_to_tree and renumber the rest
        remap: Dict[int, int] = {}
        order: List[int] = []
        stack = [self.root]
        while stack:
            node_id = stack.pop()
            remap[node_id] = len(order)
            order.append(node_id)
            stack.extend(self.nodes[node_id].children.values())

        nodes = []
        for old_id in order:
            node = self.nodes[old_id]
            node.children = {k: remap[c] for k, c in node.children.items()}
            nodes.append(node)
        self.nodes = nodes
        self.root = 0

    def node_count(self) -> int:
        return len(self.nodes)

    def check_leaves(self) -> bool:
        """True if every leaf holds an index and no internal node does."""
        if self.root is None:
            return True
        for node in self.nodes:
            if node.is_leaf() != (node.index != UNSET_INDEX):
                return False
        return True

    def __len__(self) -> int:
        return self._inserted


def _common_prefix_length(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def build_strie(text: str) -> SuffixTree:
    return SuffixTree.build(text)
