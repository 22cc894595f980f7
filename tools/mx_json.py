# Prints an exported matrix as {"dim":[...], "values":[...]} (values column by column)

import click

from mx_errors import ExportError
from mx_io import Precision, load_matrix, matrix_to_json

@click.command()
@click.argument('path')
@click.option('-o', '--out_path', help='Write the JSON here instead of stdout.')
@click.option('--single', is_flag=True, help='The file holds float32 entries.')
def main(path, out_path, single):
    precision = Precision.SINGLE if single else Precision.DOUBLE
    try:
        X = load_matrix(path, precision=precision)
    except ExportError as e:
        raise click.ClickException(str(e))

    text = matrix_to_json(X)
    if out_path:
        with open(out_path, 'w') as f:
            f.write(text)
    else:
        click.echo(text)

if __name__ == '__main__':
    main()
