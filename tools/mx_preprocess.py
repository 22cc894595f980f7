# Helper to convert text or npy matrices into the exchange format, optionally reduced by PCA

import numpy as np
import click

from mx_errors import ExportError
from mx_io import save_matrix

def pca(X, no_dims=50):
    click.echo("Preprocessing the data using PCA...")
    (n, _) = X.shape
    X = X - np.tile(np.mean(X, 0), (n, 1))
    # eigh returns the eigenvalues in ascending order
    (_, M) = np.linalg.eigh(np.dot(X.T, X))
    M = M[:, ::-1]
    Y = np.dot(X, M[:, 0:no_dims])
    return Y

def read_matrix(path):
    if path.endswith('.npy'):
        return np.load(path)
    return np.loadtxt(path, ndmin=2)

@click.command()
@click.option('-i', '--in_path', required=True)
@click.option('-o', '--out_path', required=True)
@click.option('--pca', 'no_dims', type=int, help='Reduce to this many principal components.')
@click.option('--single', is_flag=True, help='Store float32 entries.')
def main(in_path, out_path, no_dims, single):
    X = read_matrix(in_path)
    if no_dims:
        X = pca(X, no_dims)
    if single:
        X = X.astype(np.float32)

    try:
        save_matrix(X, out_path)
    except ExportError as e:
        raise click.ClickException(str(e))

    click.echo(f'{in_path} {X.shape} -> {out_path}')


if __name__ == '__main__':
    main()
