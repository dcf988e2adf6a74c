# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_azure_oauth

"""
Custom exceptions for the coreason-azure-oauth package.
"""


class CoreasonAzureOAuthError(Exception):
    """Base exception for all coreason-azure-oauth errors."""


class MalformedEndpointError(CoreasonAzureOAuthError, ValueError):
    """
    Raised when an endpoint string is not a strict absolute HTTPS URL.
    Typically caused by a tenant identifier containing whitespace, control
    characters or URL delimiters.
    """
