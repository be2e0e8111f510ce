from .interface import FileSystemInterface, Node, NodeId

__all__ = ["FileSystemInterface", "Node", "NodeId"]
