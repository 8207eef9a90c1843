# SPDX-FileCopyrightText: Copyright (c) 2024-2025, Kr8s Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import logging
from typing import Optional

import kr8s.asyncio

from ._dryrun import QueryParamVerifier

logger = logging.getLogger(__name__)


class Factory:
    """Execution context handed to commands.

    Wraps the connection flags given on the command line and exposes the
    client, the active namespace and the dry run verifier. Commands only
    talk to the cluster through the objects this returns.

    Args:
        kubeconfig: The path to a kubeconfig file to use
        context: The kubeconfig context to use
        namespace: The namespace given with ``-n/--namespace``
    """

    def __init__(
        self,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> None:
        self.kubeconfig = kubeconfig
        self.context = context
        self.namespace_override = namespace

    async def client(self):
        """Construct the kr8s API client."""
        logger.debug(
            "Constructing client kubeconfig=%s context=%s",
            self.kubeconfig,
            self.context,
        )
        return await kr8s.asyncio.api(
            kubeconfig=self.kubeconfig,
            context=self.context,
            namespace=self.namespace_override,
        )

    def namespace(self, client) -> tuple[str, bool]:
        """Return the active namespace and whether it was set explicitly."""
        if self.namespace_override:
            return self.namespace_override, True
        return client.namespace, False

    def dry_run_verifier(self, client) -> QueryParamVerifier:
        return QueryParamVerifier(client)
