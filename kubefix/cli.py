import functools
from typing import Any, Callable, Dict, Optional, Sequence, TextIO

import click
import yaml

from kubefix._cogs.clients import auth, errors, namespaces, nodes
from kubefix._cogs.configs import configuration
from kubefix._cogs.helpers import templates
from kubefix._core.actions import loggers
from kubefix._core.engines import executing, manifests


class LogFormatParamType(click.Choice):

    def __init__(self) -> None:
        super().__init__(choices=[v.name.lower() for v in loggers.LogFormat])

    def convert(self, value: Any, param: Any, ctx: Any) -> loggers.LogFormat:
        if isinstance(value, loggers.LogFormat):
            return value
        name: str = super().convert(value, param, ctx)
        return loggers.LogFormat[name.upper()]


def logging_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to configure logging in all commands the same way."""
    @click.option('-v', '--verbose', is_flag=True)
    @click.option('-d', '--debug', is_flag=True)
    @click.option('-q', '--quiet', is_flag=True)
    @click.option('--log-format', type=LogFormatParamType(), default='full')
    @click.option('--log-prefix/--no-log-prefix', default=None)
    @functools.wraps(fn)  # to preserve other opts/args
    def wrapper(verbose: bool, quiet: bool, debug: bool,
                log_format: loggers.LogFormat = loggers.LogFormat.FULL,
                log_prefix: Optional[bool] = False,
                *args: Any, **kwargs: Any) -> Any:
        loggers.configure(debug=debug, verbose=verbose, quiet=quiet,
                          log_format=log_format, log_prefix=log_prefix)
        return fn(*args, **kwargs)

    return wrapper


def template_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ A decorator to read a manifest and its placeholders' values the same way."""
    @click.argument('manifest', type=click.File('r'), default='-')
    @click.option('-p', '--param', 'param_pairs', multiple=True, metavar='KEY=VALUE')
    @click.option('--values', 'values_file', type=click.File('r'))
    @functools.wraps(fn)  # to preserve other opts/args
    def wrapper(manifest: TextIO,
                param_pairs: Sequence[str],
                values_file: Optional[TextIO],
                *args: Any, **kwargs: Any) -> Any:
        params = parse_params(param_pairs, values_file)
        return fn(*args, document=manifest.read(), params=params, **kwargs)

    return wrapper


def parse_params(
        pairs: Sequence[str],
        values_file: Optional[TextIO] = None,
) -> Dict[str, str]:
    """
    Merge the placeholders' values: from the YAML mapping first, then from KEY=VALUE pairs.
    """
    params: Dict[str, str] = {}
    if values_file is not None:
        values = yaml.safe_load(values_file) or {}
        if not isinstance(values, dict):
            raise click.BadParameter("The values must be a YAML mapping.", param_hint="'--values'")
        params.update({str(key): '' if val is None else str(val) for key, val in values.items()})
    for pair in pairs:
        key, sep, val = pair.partition('=')
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {pair!r}.", param_hint="'--param'")
        params[key] = val
    return params


def report(result: executing.ExecutionResult) -> None:
    """ Print the process's output and exit with its status if it has failed. """
    if result.error is None:
        click.echo(result.output, nl=False)
    else:
        click.echo(result.output, nl=False, err=True)
        click.get_current_context().exit(result.error.returncode or 1)


def fatal_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """ Report the broken environment as a usual CLI error, not as a traceback."""
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except errors.FatalError as e:
            cause = f" {e.__cause__}" if e.__cause__ is not None else ""
            raise click.ClickException(f"{e}{cause}") from e

    return wrapper


pass_settings = click.make_pass_decorator(configuration.FixtureSettings, ensure=True)


@click.group(name='kubefix', context_settings=dict(
    auto_envvar_prefix='KUBEFIX',
))
@click.option('--kubeconfig', type=str, envvar=configuration.KUBECONFIG_ENV)
@click.option('--context', type=str, envvar=configuration.CONTEXT_ENV)
@click.option('--node-address', type=str, envvar=configuration.NODE_ADDRESS_ENV)
@click.option('--kubectl', type=str, envvar=configuration.KUBECTL_ENV)
@click.pass_context
def main(
        ctx: click.Context,
        kubeconfig: Optional[str],
        context: Optional[str],
        node_address: Optional[str],
        kubectl: Optional[str],
) -> None:
    """ Provision the test fixtures in a Kubernetes cluster. """
    # The settings can be pre-populated by the caller (e.g. in tests) via `obj=`.
    settings = ctx.ensure_object(configuration.FixtureSettings)
    if kubeconfig:
        settings.cluster.kubeconfig = kubeconfig
    if context:
        settings.cluster.context = context
    if node_address:
        settings.cluster.node_address = node_address
    if kubectl:
        settings.tools.kubectl = kubectl


@main.command()
@logging_options
@template_options
def render(document: str, params: Dict[str, str]) -> None:
    """ Print the manifest with the placeholders substituted. """
    click.echo(templates.render(document, params), nl=False)


@main.command()
@logging_options
@template_options
@pass_settings
def apply(settings: configuration.FixtureSettings, document: str, params: Dict[str, str]) -> None:
    """ Render the manifest and apply it via kubectl. """
    report(manifests.apply_from_template(document, params, settings=settings))


@main.command()
@logging_options
@template_options
@pass_settings
def delete(settings: configuration.FixtureSettings, document: str, params: Dict[str, str]) -> None:
    """ Render the manifest and delete it via kubectl. """
    report(manifests.delete_from_template(document, params, settings=settings))


@main.command(name='exec')
@logging_options
@click.argument('command')
@pass_settings
def exec_(settings: configuration.FixtureSettings, command: str) -> None:
    """ Run a shell command; print its stdout, or its stderr on failure. """
    report(executing.run_shell(command, settings=settings))


@main.command()
@logging_options
@click.argument('name')
@pass_settings
@fatal_errors
def namespace(settings: configuration.FixtureSettings, name: str) -> None:
    """ Create a labeled namespace for the tests. """
    client = auth.new_typed_client(settings)
    result = namespaces.create_namespace(client, name)
    click.echo(result.metadata.name)


@main.command(name='node-address')
@logging_options
@pass_settings
@fatal_errors
def node_address(settings: configuration.FixtureSettings) -> None:
    """ Print the address of a node to reach the cluster's services. """
    click.echo(nodes.resolve_node_address(settings))
