# SPDX-License-Identifier: MIT
"""Core types for resxgen: resources, requests, items and errors."""
