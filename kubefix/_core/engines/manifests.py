"""
Applying & deleting the manifests via ``kubectl``.

The manifest is fed to ``kubectl apply -f -`` (or ``delete``) via stdin,
so no quoting or escaping of its content is ever needed, and the shell
does not expand anything in it.

The results are those of :mod:`executing` as is: this layer adds
no error classification of its own. Whatever ``kubectl`` reports
to its stderr is the failure's output.
"""
import logging
from typing import List, Optional

from kubefix._cogs.configs import configuration
from kubefix._cogs.helpers import templates, typedefs
from kubefix._core.engines import executing

logger = logging.getLogger(__name__)


def apply(
        document: str,
        *,
        settings: Optional[configuration.FixtureSettings] = None,
) -> executing.ExecutionResult:
    return _kubectl(['apply', '-f', '-'], document, settings=settings)


def delete(
        document: str,
        *,
        settings: Optional[configuration.FixtureSettings] = None,
) -> executing.ExecutionResult:
    return _kubectl(['delete', '-f', '-'], document, settings=settings)


def apply_from_template(
        document: str,
        params: typedefs.TemplateParameters,
        *,
        settings: Optional[configuration.FixtureSettings] = None,
) -> executing.ExecutionResult:
    """ Render the placeholders in the manifest and apply it. """
    return apply(templates.render(document, params), settings=settings)


def delete_from_template(
        document: str,
        params: typedefs.TemplateParameters,
        *,
        settings: Optional[configuration.FixtureSettings] = None,
) -> executing.ExecutionResult:
    """ Render the placeholders in the manifest and delete it. """
    return delete(templates.render(document, params), settings=settings)


def _kubectl(
        args: List[str],
        document: str,
        *,
        settings: Optional[configuration.FixtureSettings],
) -> executing.ExecutionResult:
    settings = settings if settings is not None else configuration.FixtureSettings.from_env()

    # Without an explicit kubeconfig, let kubectl follow its own rules (e.g. $KUBECONFIG).
    options: List[str] = []
    if settings.cluster.kubeconfig:
        options += ['--kubeconfig', settings.cluster.kubeconfig]
    if settings.cluster.context:
        options += ['--context', settings.cluster.context]

    logger.debug(f"Feeding {len(document)} chars to kubectl {' '.join(args)}.")
    return executing.run_command([settings.tools.kubectl, *options, *args], input=document)
