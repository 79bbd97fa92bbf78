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

"""Cloud Bigtable table administration handles."""

from google.cloud.admin_surface.bigtable.client import Client
from google.cloud.admin_surface.bigtable.cluster_state import ClusterState
from google.cloud.admin_surface.bigtable.column_family import ColumnFamily
from google.cloud.admin_surface.bigtable.column_family import ColumnFamilyMap
from google.cloud.admin_surface.bigtable.enums import Granularity
from google.cloud.admin_surface.bigtable.enums import ReplicationState
from google.cloud.admin_surface.bigtable.enums import View
from google.cloud.admin_surface.bigtable.gc_rule import GCRuleIntersection
from google.cloud.admin_surface.bigtable.gc_rule import GCRuleUnion
from google.cloud.admin_surface.bigtable.gc_rule import MaxAgeGCRule
from google.cloud.admin_surface.bigtable.gc_rule import MaxVersionsGCRule
from google.cloud.admin_surface.bigtable.service import Service
from google.cloud.admin_surface.bigtable.service import TableLookup
from google.cloud.admin_surface.bigtable.table import Table

__all__ = (
    "Client",
    "ClusterState",
    "ColumnFamily",
    "ColumnFamilyMap",
    "GCRuleIntersection",
    "GCRuleUnion",
    "Granularity",
    "MaxAgeGCRule",
    "MaxVersionsGCRule",
    "ReplicationState",
    "Service",
    "Table",
    "TableLookup",
    "View",
)
