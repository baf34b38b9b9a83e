"""Data Transfer Objects for application layer."""

from hashkit.application.dtos.hash_dto import HashSelectionDTO, UpgradeResultDTO

__all__ = ["HashSelectionDTO", "UpgradeResultDTO"]
