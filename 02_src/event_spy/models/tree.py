"""Tree node: the atomic unit of the report."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A named element with attributes, ordered children and an optional value."""

    name: str
    value: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["TreeNode"] = field(default_factory=list)

    def set_attribute(self, name: str, value: str | None) -> None:
        """Set an attribute. None values are not recorded."""
        if value is None:
            return
        self.attributes[name] = str(value)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """Append a child and return it."""
        self.children.append(child)
        return child

    def get_child(self, name: str) -> "TreeNode | None":
        """Get the first child with the given name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def get_children(self, name: str | None = None) -> list["TreeNode"]:
        """Get children, optionally filtered by name."""
        if name is None:
            return list(self.children)
        return [child for child in self.children if child.name == name]

    def deep_copy(self, name: str | None = None) -> "TreeNode":
        """Copy this node and its subtree, optionally renaming the copy."""
        return TreeNode(
            name=name or self.name,
            value=self.value,
            attributes=dict(self.attributes),
            children=[child.deep_copy() for child in self.children],
        )

    def to_element(self) -> ET.Element:
        """Convert to an ElementTree element."""
        element = ET.Element(self.name, dict(self.attributes))
        if self.value is not None:
            element.text = self.value
        for child in self.children:
            element.append(child.to_element())
        return element

    def to_xml(self) -> str:
        """Render the subtree as an XML string."""
        return ET.tostring(self.to_element(), encoding="unicode")
