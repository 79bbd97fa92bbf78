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

"""Factory for Cloud Data Loss Prevention clients.

The Cloud Data Loss Prevention (DLP) API is a service that allows clients
to detect the presence of Personally Identifiable Information (PII) and other
privacy-sensitive data in user-supplied, unstructured data streams, like text
blocks or images. The service also includes methods for sensitive data
redaction and scheduling of data scans on Google Cloud Platform based data
sets.

The generated clients ship in the ``google-cloud-dlp`` distribution, installed
with the ``dlp`` extra.
"""

import importlib
import logging

from google.cloud.admin_surface.config import ClientConfig


_LOGGER = logging.getLogger(__name__)

DEFAULT_VERSION = "v2"


def _version_module_name(version):
    version = str(version).lower().replace("_", "")
    return "google.cloud.dlp_{}".format(version)


def dlp_service(version=DEFAULT_VERSION, config=None):
    """Create a client object for the DlpService.

    Returns an instance of ``google.cloud.dlp_<version>.DlpServiceClient``
    configured from ``config``.

    :type version: str
    :param version: (Optional) The API version to connect to. Defaults to
                    ``"v2"``.

    :type config: :class:`~google.cloud.admin_surface.config.ClientConfig`
    :param config: (Optional) Client settings. Defaults to an empty config.

    :raises: :class:`ValueError <exceptions.ValueError>` if no client is
             available for ``version``.
    """
    config = config if config is not None else ClientConfig()
    module_name = _version_module_name(version)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(
            "DlpService is not available for version {!r}".format(version)
        ) from exc

    client_cls = getattr(module, "DlpServiceClient", None)
    if client_cls is None:
        raise ValueError("{} does not provide a DlpServiceClient".format(module_name))

    transports = importlib.import_module(
        "{}.services.dlp_service.transports.base".format(module_name)
    )
    _LOGGER.debug("Creating %s.DlpServiceClient", module_name)
    return client_cls(**config.client_kwargs(client_cls, transports.DEFAULT_CLIENT_INFO))
