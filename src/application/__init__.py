"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers and the CLI.
"""

from src.application.dto import ErrorResponse, HealthResponse
from src.application.use_cases import (
    InitializeSystemUseCase,
    PrintAndSaveReceiptUseCase,
    RenderReceiptUseCase,
    SaveReceiptUseCase,
    SeedDatabaseUseCase,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "InitializeSystemUseCase",
    "PrintAndSaveReceiptUseCase",
    "RenderReceiptUseCase",
    "SaveReceiptUseCase",
    "SeedDatabaseUseCase",
]
