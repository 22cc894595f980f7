import pylab
import click
import numpy as np

from mx_errors import ExportError
from mx_io import Precision, load_matrix, load_vector

@click.command()
@click.argument('path')
@click.argument('output_path')
@click.option('--vector', is_flag=True, help='PATH holds a vector instead of a matrix.')
@click.option('--scatter', is_flag=True, help='Scatter the first two columns instead of a heatmap.')
@click.option('--single', is_flag=True, help='PATH holds float32 entries.')
@click.option('--labels')
def main(path, output_path, vector, scatter, single, labels):
    precision = Precision.SINGLE if single else Precision.DOUBLE
    try:
        Y = load_vector(path, precision=precision) if vector else load_matrix(path, precision=precision)
    except ExportError as e:
        raise click.ClickException(str(e))

    pylab.clf()
    if vector:
        pylab.plot(np.arange(len(Y)), Y, marker='o')
        pylab.xlabel("index")
    elif scatter:
        if Y.shape[1] < 2:
            raise click.ClickException(f'Need at least two columns to scatter, got {Y.shape[1]}')
        if labels:
            pylab.scatter(Y[:, 0], Y[:, 1], 20, np.loadtxt(labels))
        else:
            pylab.scatter(Y[:, 0], Y[:, 1], 20)
    else:
        pylab.imshow(Y, aspect='auto', interpolation='nearest')
        pylab.colorbar()
        pylab.xlabel("column")
        pylab.ylabel("row")

    pylab.title(f"{path} {Y.shape}")
    pylab.savefig(output_path)

if __name__ == '__main__':
    main()
