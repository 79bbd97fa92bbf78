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
"""Remote calls made on behalf of table handles."""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import logging

from dataclasses import dataclass

from google.api_core import exceptions as core_exceptions
from google.api_core import gapic_v1
from google.cloud._helpers import _to_bytes  # type: ignore
from google.cloud.bigtable_admin_v2 import BigtableTableAdminClient
from google.cloud.bigtable_admin_v2.services.bigtable_table_admin.transports.base import (
    DEFAULT_CLIENT_INFO,
)
from google.cloud.bigtable_admin_v2.types import bigtable_table_admin
from google.cloud.bigtable_admin_v2.types import table as table_pb2

from google.cloud.admin_surface.config import ClientConfig


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableLookup:
    """Outcome of a table lookup: found, not found, or failed.

    Exactly one of ``table`` and ``error`` is set.
    """

    table: Optional[table_pb2.Table] = None
    error: Optional[core_exceptions.GoogleAPICallError] = None

    @property
    def found(self) -> bool:
        return self.table is not None

    @property
    def not_found(self) -> bool:
        return isinstance(self.error, core_exceptions.NotFound)

    def unwrap(self) -> table_pb2.Table:
        """Return the table, raising the captured error if there is one."""
        if self.error is not None:
            raise self.error
        return self.table


class Service(object):
    """Bigtable table admin calls scoped to one project.

    Wraps a :class:`~google.cloud.bigtable_admin_v2.BigtableTableAdminClient`
    and applies the retry, timeout and metadata of a
    :class:`~google.cloud.admin_surface.config.ClientConfig` to each call.

    :type project: str
    :param project: The project which owns the tables.

    :type config: :class:`~google.cloud.admin_surface.config.ClientConfig`
    :param config: (Optional) Client settings. Defaults to an empty config.

    :type table_admin_client: :class:`~google.cloud.bigtable_admin_v2.BigtableTableAdminClient`
    :param table_admin_client: (Optional) A pre-built admin client. If unset,
                               one is created on first use from ``config``.
    """

    def __init__(
        self,
        project: str,
        config: Optional[ClientConfig] = None,
        table_admin_client: Optional[BigtableTableAdminClient] = None,
    ):
        self.project = project
        self.config = config if config is not None else ClientConfig()
        self._table_admin_client = table_admin_client

    @property
    def table_admin_client(self) -> BigtableTableAdminClient:
        if self._table_admin_client is None:
            self._table_admin_client = BigtableTableAdminClient(
                **self.config.client_kwargs(
                    BigtableTableAdminClient, DEFAULT_CLIENT_INFO
                )
            )
        return self._table_admin_client

    def instance_path(self, instance_id: str) -> str:
        return BigtableTableAdminClient.instance_path(self.project, instance_id)

    def table_path(self, instance_id: str, table_id: str) -> str:
        return BigtableTableAdminClient.table_path(self.project, instance_id, table_id)

    def _call_options(self, timeout: Optional[float] = None) -> Dict[str, Any]:
        retry = self.config.build_retry()
        if timeout is None:
            timeout = self.config.timeout
        return {
            "retry": retry if retry is not None else gapic_v1.method.DEFAULT,
            "timeout": timeout if timeout is not None else gapic_v1.method.DEFAULT,
            "metadata": self.config.call_metadata(),
        }

    def get_table(
        self, instance_id: str, table_id: str, view: Optional[int] = None
    ) -> table_pb2.Table:
        """Fetch a table, populating the fields selected by ``view``.

        :raises: :class:`google.api_core.exceptions.NotFound` if the table
                 does not exist.
        """
        request = {"name": self.table_path(instance_id, table_id)}
        if view is not None:
            request["view"] = view
        _LOGGER.debug("GetTable %s (view=%s)", request["name"], view)
        return self.table_admin_client.get_table(
            request=request, **self._call_options()
        )

    def lookup_table(
        self, instance_id: str, table_id: str, view: Optional[int] = None
    ) -> TableLookup:
        """Like :meth:`get_table`, but report failures in a :class:`TableLookup`."""
        try:
            return TableLookup(table=self.get_table(instance_id, table_id, view=view))
        except core_exceptions.GoogleAPICallError as exc:
            _LOGGER.debug("Lookup of table %s failed: %s", table_id, exc)
            return TableLookup(error=exc)

    def list_tables(
        self, instance_id: str, view: Optional[int] = None
    ) -> List[table_pb2.Table]:
        request = {"parent": self.instance_path(instance_id)}
        if view is not None:
            request["view"] = view
        _LOGGER.debug("ListTables %s (view=%s)", request["parent"], view)
        return list(
            self.table_admin_client.list_tables(request=request, **self._call_options())
        )

    def create_table(
        self,
        instance_id: str,
        table_id: str,
        table: table_pb2.Table,
        initial_splits: Optional[Sequence[Any]] = None,
    ) -> table_pb2.Table:
        """Create a table.

        :type initial_splits: list
        :param initial_splits: (Optional) Row keys (``bytes`` or ``str``)
                               used to initially split the table into
                               several tablets.
        """
        request = {
            "parent": self.instance_path(instance_id),
            "table_id": table_id,
            "table": table,
        }
        if initial_splits:
            Split = bigtable_table_admin.CreateTableRequest.Split
            request["initial_splits"] = [
                Split(key=_to_bytes(key)) for key in initial_splits
            ]
        _LOGGER.debug("CreateTable %s in %s", table_id, request["parent"])
        return self.table_admin_client.create_table(
            request=request, **self._call_options()
        )

    def delete_table(self, instance_id: str, table_id: str) -> None:
        name = self.table_path(instance_id, table_id)
        _LOGGER.debug("DeleteTable %s", name)
        self.table_admin_client.delete_table(name=name, **self._call_options())

    def modify_column_families(
        self,
        instance_id: str,
        table_id: str,
        modifications: Sequence[
            bigtable_table_admin.ModifyColumnFamiliesRequest.Modification
        ],
    ) -> table_pb2.Table:
        """Apply column family modifications in a single request.

        Either all or none of the modifications take effect, but data
        requests received meanwhile may observe some of them only.
        """
        name = self.table_path(instance_id, table_id)
        _LOGGER.debug(
            "ModifyColumnFamilies %s (%d modifications)", name, len(modifications)
        )
        return self.table_admin_client.modify_column_families(
            name=name, modifications=list(modifications), **self._call_options()
        )

    def drop_row_range(
        self,
        instance_id: str,
        table_id: str,
        row_key_prefix=None,
        delete_all_data_from_table: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Delete the rows sharing a key prefix, or every row of the table.

        :type timeout: float
        :param timeout: (Optional) The amount of time, in seconds, to wait
                        for the request to complete.
        """
        request: Dict[str, Any] = {"name": self.table_path(instance_id, table_id)}
        if row_key_prefix is not None:
            request["row_key_prefix"] = _to_bytes(row_key_prefix)
        if delete_all_data_from_table:
            request["delete_all_data_from_table"] = True
        _LOGGER.debug("DropRowRange %s", request)
        self.table_admin_client.drop_row_range(
            request=request, **self._call_options(timeout=timeout)
        )

    def generate_consistency_token(self, instance_id: str, table_id: str) -> str:
        name = self.table_path(instance_id, table_id)
        _LOGGER.debug("GenerateConsistencyToken %s", name)
        response = self.table_admin_client.generate_consistency_token(
            name=name, **self._call_options()
        )
        return response.consistency_token

    def check_consistency(self, instance_id: str, table_id: str, token: str) -> bool:
        name = self.table_path(instance_id, table_id)
        response = self.table_admin_client.check_consistency(
            name=name, consistency_token=token, **self._call_options()
        )
        _LOGGER.debug("CheckConsistency %s: consistent=%s", name, response.consistent)
        return response.consistent
