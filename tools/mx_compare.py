import click
import numpy as np

from mx_errors import ExportError
from mx_io import Precision, load_matrix

@click.command()
@click.argument('path1')
@click.argument('path2')
@click.option('--single', is_flag=True, help='Both files hold float32 entries.')
@click.option('--fail_max_difference', default=1.0)
@click.option('--fail_avg_difference', default=1.0)
def main(path1, path2, single, fail_max_difference, fail_avg_difference):
    precision = Precision.SINGLE if single else Precision.DOUBLE
    try:
        X1 = load_matrix(path1, precision=precision)
        X2 = load_matrix(path2, precision=precision)
    except ExportError as e:
        raise click.ClickException(str(e))

    click.echo(f'{X1.shape=} {X2.shape=}')
    if X1.shape != X2.shape:
        raise click.ClickException(f'Shapes differ: {X1.shape} != {X2.shape}')
    if X1.size == 0:
        click.echo("Success!")
        return

    normalize = max(np.abs(X1).max(), np.abs(X2).max())
    if normalize == 0:
        normalize = 1.0

    max_difference = np.abs(X1-X2).max() / normalize
    avg_difference = np.abs(X1-X2).mean() / normalize

    click.echo(f'max(difference) = {100*max_difference}%')
    click.echo(f'avg(difference) = {100*avg_difference}%')

    if max_difference >= fail_max_difference:
        click.echo(f'Failed because max_difference={max_difference} > {fail_max_difference}=fail_max_difference')
        raise SystemExit(1)

    if avg_difference >= fail_avg_difference:
        click.echo(f'Failed because avg_difference={avg_difference} > {fail_avg_difference}=fail_avg_difference')
        raise SystemExit(1)

    click.echo("Success!")

if __name__ == '__main__':
    main()
