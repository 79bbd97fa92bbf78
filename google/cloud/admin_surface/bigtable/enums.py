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

"""Wrappers for the admin API enums used by table handles."""

from google.cloud.bigtable_admin_v2.types import table as table_pb2


View = table_pb2.Table.View
"""Scope of the metadata populated by a table fetch.

* ``NAME_ONLY``: only ``name``.
* ``SCHEMA_VIEW``: ``name``, ``granularity`` and ``column_families``.
* ``REPLICATION_VIEW``: ``name`` and ``cluster_states``.
* ``FULL``: every field.
"""

Granularity = table_pb2.Table.TimestampGranularity
"""Granularity at which cell timestamps are stored (``MILLIS``)."""

ReplicationState = table_pb2.Table.ClusterState.ReplicationState
"""Replication state of a table within one cluster."""
