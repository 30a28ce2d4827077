"""Fila de tasks diferidas."""

from .qstash_publisher import QStashTaskPublisher, create_qstash_publisher, publish_best_effort

__all__ = ["QStashTaskPublisher", "create_qstash_publisher", "publish_best_effort"]
