# Helper to create randomized matrices and vectors in the exchange format.

import numpy as np
import click

from mx_errors import ExportError
from mx_io import Precision, save_matrix, save_vector

PRECISIONS = {'single': Precision.SINGLE, 'double': Precision.DOUBLE}

@click.command()
@click.option('-n', '--rows', type=int, required=True)
@click.option('-d', '--cols', type=int, default=2, show_default=True)
@click.option('-o', '--out_path', required=True)
@click.option('-f', '--folder', help='Existing directory to place out_path in.')
@click.option('-p', '--precision', type=click.Choice(list(PRECISIONS)), default='double', show_default=True)
@click.option('--vector', is_flag=True, help='Write a vector of length n instead of a matrix.')
@click.option('--seed', type=int)
def main(rows, cols, out_path, folder, precision, vector, seed):
    rng = np.random.default_rng(seed)
    shape = (rows,) if vector else (rows, cols)
    Y = rng.standard_normal(shape)

    try:
        if vector:
            save_vector(Y, out_path, folder, PRECISIONS[precision])
        else:
            save_matrix(Y, out_path, folder, PRECISIONS[precision])
    except ExportError as e:
        raise click.ClickException(str(e))

    click.echo(f'wrote {Y.shape} {precision} to {out_path}')

if __name__ == '__main__':
    main()
