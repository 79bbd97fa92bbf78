# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from __future__ import annotations

from google.api_core import exceptions as core_exceptions

# Remote failures surface as the ``google.api_core`` taxonomy.
NotFound = core_exceptions.NotFound
InvalidArgument = core_exceptions.InvalidArgument
ServiceUnavailable = core_exceptions.ServiceUnavailable
GoogleAPICallError = core_exceptions.GoogleAPICallError


class ServiceNotBoundError(RuntimeError):
    """Raised when a handle needs a remote call but has no service bound."""

    def __init__(self, message: str = "Must have active connection to service"):
        super().__init__(message)


class FrozenColumnFamilyMapError(TypeError):
    """Raised when a frozen :class:`ColumnFamilyMap` is modified."""
