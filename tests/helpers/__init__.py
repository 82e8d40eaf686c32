#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test helper modules for eventiter testing.

This package contains mock event emitters used to drive iterators in tests."""

from __future__ import annotations

# 🔼⚙️🔚
