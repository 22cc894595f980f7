# Helper to sample rows of an exported matrix, together with their labels

import numpy as np
import click

from mx_errors import ExportError
from mx_io import load_matrix, save_matrix, save_vector

@click.command()
@click.option('-i', '--in_path', required=True)
@click.option('-l', '--labels_path')
@click.option('-o', '--out_path', required=True)
@click.option('-a', '--labels_out_path')
@click.option('-n', '--number', type=int, required=True)
@click.option('--seed', type=int)
def main(in_path, out_path, number, labels_path, labels_out_path, seed):
    if labels_out_path and not labels_path:
        raise click.UsageError('--labels_out_path needs --labels_path')

    rng = np.random.default_rng(seed)
    try:
        X = load_matrix(in_path)
        if number > len(X):
            raise click.BadParameter(f'cannot sample {number} of {len(X)} rows', param_hint='--number')
        sampled_indices = rng.choice(len(X), size=number, replace=False)
        save_matrix(X[sampled_indices], out_path)

        if labels_out_path:
            labels = np.loadtxt(labels_path, ndmin=1)
            save_vector(labels[sampled_indices], labels_out_path)
    except ExportError as e:
        raise click.ClickException(str(e))


if __name__ == '__main__':
    main()
