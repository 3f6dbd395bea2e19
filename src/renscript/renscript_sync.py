"""
Tree synchronizer: structural edits on a parsed renscript tree.

An interactive editor keeps a `Script` in memory and changes it only through
the operations here, then regenerates text. Every operation leaves nodes it
does not touch exactly as they were, ids included.

Failures are reported through return values (None, False or an
`AddLabelResult` carrying a `SyncError`), never by raising.

Lookups share one pre-order walk over every statement list in the tree:
top-level statements, label bodies, if-branch bodies and menu-choice bodies,
to any depth.
"""

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from renscript import renscript_factory as factory
from renscript.renscript_ast import ASTNode, DialogueNode, LabelNode, MenuNode, Script
from renscript.renscript_constants import RESERVED_WORDS

logger = logging.getLogger(__name__)

LABEL_NAME_RE = re.compile(r"^[A-Za-z_][\w]*(?:\.[A-Za-z_]\w*)*$")


@dataclass
class DialogueData:
    speaker: str | None
    text: str
    attributes: list[str] | None = None


@dataclass
class ChoiceData:
    text: str
    condition: str | None = None
    body: list[ASTNode] = field(default_factory=list)


@dataclass
class MenuData:
    prompt: str | None = None
    choices: list[ChoiceData] = field(default_factory=list)


@dataclass
class SyncError:
    """Why a synchronizer operation was refused.

    Attributes:
        type (str): Machine-readable reason, ``duplicate_label`` or ``invalid_name``.
        message (str): Human-readable description.
        existing_label_id (str | None): Id of the clashing label, for duplicates.
    """

    type: str
    message: str
    existing_label_id: str | None = None


@dataclass
class AddLabelResult:
    success: bool
    label_id: str | None = None
    error: SyncError | None = None


def walk_bodies(statements: list[ASTNode]) -> Iterator[list[ASTNode]]:
    """Yields `statements` and every nested statement list below it, pre-order."""
    yield statements
    for node in statements:
        for body in node.child_bodies():
            yield from walk_bodies(body)


def visit(tree: Script, predicate: Callable[[ASTNode], bool]) -> ASTNode | None:
    """Returns the first node, in pre-order, for which `predicate` holds."""
    for body in walk_bodies(tree.statements):
        for node in body:
            if predicate(node):
                return node
    return None


class TreeSynchronizer:
    """Structural mutation API over a `Script`.

    Label lookups by name only consider top-level labels. Node lookups by id
    search the whole tree.
    """

    def find_label(self, tree: Script, name: str) -> LabelNode | None:
        for node in tree.statements:
            if isinstance(node, LabelNode) and node.name == name:
                return node
        logger.debug("label %r not found", name)
        return None

    def find_node(self, tree: Script, node_id: str) -> ASTNode | None:
        """Finds any node in the tree by id."""
        node = visit(tree, lambda n: n.id == node_id)
        if node is None:
            logger.debug("node %r not found", node_id)
        return node

    @staticmethod
    def insert_into_body(
        body: list[ASTNode], node: ASTNode, after_node_id: str | None = None
    ) -> None:
        """Inserts after the direct child `after_node_id`, or appends."""
        if after_node_id is not None:
            for index, child in enumerate(body):
                if child.id == after_node_id:
                    body.insert(index + 1, node)
                    return
            logger.debug("anchor %r is not a child, appending instead", after_node_id)
        body.append(node)

    def insert_dialogue(
        self,
        label_name: str,
        data: DialogueData,
        tree: Script,
        after_node_id: str | None = None,
    ) -> str | None:
        """Adds a dialogue line to a top-level label.

        Args:
            label_name: Name of the target label.
            data: Speaker, text and attributes of the new line.
            tree: The script to modify.
            after_node_id: Optional id of a direct child of the label to insert
                after. Missing or unknown ids append to the end of the body.

        Returns:
            The new node's id, or None if the label does not exist.
        """
        label = self.find_label(tree, label_name)
        if label is None:
            return None
        node = factory.create_dialogue(
            data.text, data.speaker, attributes=data.attributes or None
        )
        self.insert_into_body(label.body, node, after_node_id)
        logger.debug("inserted dialogue %s into label %r", node.id, label_name)
        return node.id

    def insert_menu(
        self,
        label_name: str,
        data: MenuData,
        tree: Script,
        after_node_id: str | None = None,
    ) -> str | None:
        """Adds a menu to a top-level label. Placement follows `insert_dialogue`."""
        label = self.find_label(tree, label_name)
        if label is None:
            return None
        choices = [
            factory.create_menu_choice(c.text, list(c.body), condition=c.condition)
            for c in data.choices
        ]
        node = factory.create_menu(choices, prompt=data.prompt)
        self.insert_into_body(label.body, node, after_node_id)
        logger.debug("inserted menu %s into label %r", node.id, label_name)
        return node.id

    def insert_jump_into_label(self, label_name: str, target: str, tree: Script) -> bool:
        label = self.find_label(tree, label_name)
        if label is None:
            return False
        label.body.append(factory.create_jump(target))
        logger.debug("appended jump to %r in label %r", target, label_name)
        return True

    def insert_call_into_label(self, label_name: str, target: str, tree: Script) -> bool:
        label = self.find_label(tree, label_name)
        if label is None:
            return False
        label.body.append(factory.create_call(target))
        logger.debug("appended call to %r in label %r", target, label_name)
        return True

    def insert_jump_into_choice(
        self, menu_id: str, choice_index: int, target: str, tree: Script
    ) -> bool:
        """Appends a jump to one choice of a menu found anywhere in the tree.

        Returns:
            False if no menu has `menu_id` or `choice_index` is out of range.
        """
        menu = self.find_node(tree, menu_id)
        if not isinstance(menu, MenuNode):
            return False
        if not 0 <= choice_index < len(menu.choices):
            logger.debug("menu %s has no choice %d", menu_id, choice_index)
            return False
        menu.choices[choice_index].body.append(factory.create_jump(target))
        logger.debug("appended jump to %r in choice %d of %s", target, choice_index, menu_id)
        return True

    def add_label(self, name: str, tree: Script) -> AddLabelResult:
        """
        Appends an empty top-level label.

        Names are compared exactly and case-sensitively against existing
        top-level labels.
        """
        if not LABEL_NAME_RE.match(name) or name in RESERVED_WORDS:
            return AddLabelResult(
                success=False,
                error=SyncError("invalid_name", f"'{name}' is not a valid label name"),
            )
        existing = self.find_label(tree, name)
        if existing is not None:
            return AddLabelResult(
                success=False,
                error=SyncError(
                    "duplicate_label",
                    f"Label '{name}' already exists",
                    existing_label_id=existing.id,
                ),
            )
        label = factory.create_label(name)
        tree.statements.append(label)
        logger.debug("added label %r as %s", name, label.id)
        return AddLabelResult(success=True, label_id=label.id)

    def remove_label(self, name: str, tree: Script) -> bool:
        """Removes the first top-level label called `name`, body included."""
        label = self.find_label(tree, name)
        if label is None:
            return False
        tree.statements.remove(label)
        logger.debug("removed label %r", name)
        return True

    def update_dialogue_text(self, node_id: str, text: str, tree: Script) -> bool:
        node = self.find_node(tree, node_id)
        if not isinstance(node, DialogueNode):
            return False
        node.text = text
        return True

    def update_dialogue_speaker(
        self, node_id: str, speaker: str | None, tree: Script
    ) -> bool:
        """Changes the speaker of a dialogue node. None turns it into narration."""
        node = self.find_node(tree, node_id)
        if not isinstance(node, DialogueNode):
            return False
        node.speaker = speaker
        if speaker is None:
            node.attributes = None
        return True


synchronizer = TreeSynchronizer()

__all__ = [
    "AddLabelResult",
    "ChoiceData",
    "DialogueData",
    "MenuData",
    "SyncError",
    "TreeSynchronizer",
    "synchronizer",
    "visit",
    "walk_bodies",
]
