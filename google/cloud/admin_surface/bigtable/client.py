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

"""Project-scoped entry point for Cloud Bigtable table administration."""

import dataclasses

from google.cloud.client import ClientWithProject  # type: ignore

from google.cloud.admin_surface.bigtable.enums import View
from google.cloud.admin_surface.bigtable.service import Service
from google.cloud.admin_surface.bigtable.table import Table
from google.cloud.admin_surface.config import ClientConfig


ADMIN_SCOPE = "https://www.googleapis.com/auth/bigtable.admin"
"""Scope for interacting with the Table Admin API."""


class Client(ClientWithProject):
    """Client for Cloud Bigtable table administration.

    :type project: str
    :param project: (Optional) The ID of the project which owns the tables.
                    If not passed, falls back to the default inferred from
                    the environment.

    :type credentials: :class:`~google.auth.credentials.Credentials`
    :param credentials: (Optional) The OAuth2 credentials to use. If not
                        passed, the credentials of ``config`` are used, and
                        failing that the default inferred from the
                        environment.

    :type config: :class:`~google.cloud.admin_surface.config.ClientConfig`
    :param config: (Optional) Settings applied to every request.
    """

    SCOPE = (ADMIN_SCOPE,)

    def __init__(self, project=None, credentials=None, config=None):
        self._config = config if config is not None else ClientConfig()
        if credentials is None:
            credentials = self._config.resolve_credentials()
        super(Client, self).__init__(
            project=project,
            credentials=credentials,
            client_options=self._config.client_options,
            _http=None,
        )
        self._service = None

    @property
    def config(self):
        return self._config

    @property
    def service(self):
        """The :class:`Service` used by handles created from this client.

        :rtype: :class:`~google.cloud.admin_surface.bigtable.service.Service`
        """
        if self._service is None:
            config = dataclasses.replace(self._config, credentials=self._credentials)
            self._service = Service(self.project, config=config)
        return self._service

    def table(self, instance_id, table_id, view=None, perform_lookup=False):
        """Get a handle for a table.

        :type instance_id: str
        :param instance_id: The ID of the instance owning the table.

        :type table_id: str
        :param table_id: The ID of the table.

        :type view: int
        :param view: (Optional) The view to fetch when ``perform_lookup`` is
                     set. Defaults to :attr:`View.SCHEMA_VIEW`.

        :type perform_lookup: bool
        :param perform_lookup: (Optional) Fetch the table now. Otherwise the
                               handle is built from its path and loads data
                               on first use.

        :rtype: :class:`~google.cloud.admin_surface.bigtable.table.Table`
        :returns: The table handle, or ``None`` if ``perform_lookup`` is set
                  and the table does not exist.
        """
        if not perform_lookup:
            return Table.from_path(
                self.service.table_path(instance_id, table_id), self.service
            )

        view = view if view is not None else View.SCHEMA_VIEW
        lookup = self.service.lookup_table(instance_id, table_id, view=view)
        if lookup.not_found:
            return None
        return Table.from_pb(lookup.unwrap(), self.service, view=view)

    def tables(self, instance_id, view=None):
        """List the tables of an instance.

        :type instance_id: str
        :param instance_id: The ID of the instance.

        :type view: int
        :param view: (Optional) The view to list with. Defaults to
                     :attr:`View.NAME_ONLY`.

        :rtype: list
        :returns: List of :class:`~google.cloud.admin_surface.bigtable.table.Table`.
        """
        view = view if view is not None else View.NAME_ONLY
        return [
            Table.from_pb(table_pb, self.service, view=view)
            for table_pb in self.service.list_tables(instance_id, view=view)
        ]

    def create_table(
        self,
        instance_id,
        table_id,
        column_families=None,
        granularity=None,
        initial_splits=None,
        configure=None,
    ):
        """Create a table. See :meth:`Table.create`.

        :rtype: :class:`~google.cloud.admin_surface.bigtable.table.Table`
        """
        return Table.create(
            self.service,
            instance_id,
            table_id,
            column_families=column_families,
            granularity=granularity,
            initial_splits=initial_splits,
            configure=configure,
        )

    def delete_table(self, instance_id, table_id):
        """Permanently delete a table.

        :rtype: bool
        """
        self.service.delete_table(instance_id, table_id)
        return True
