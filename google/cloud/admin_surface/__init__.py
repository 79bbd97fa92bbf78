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

"""Client surface for Cloud Bigtable table administration and Cloud DLP."""

from google.cloud.admin_surface import gapic_version as package_version

from google.cloud.admin_surface.config import ClientConfig
from google.cloud.admin_surface.dlp import dlp_service

__version__: str = package_version.__version__

__all__ = (
    "ClientConfig",
    "dlp_service",
)
