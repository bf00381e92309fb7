from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from .exceptions import PdfXmlParseError, TableConfigError
from .main import pdfxml_to_csv

log = logging.getLogger(__name__)


def _parse_range(value: str) -> Tuple[int, int]:
    try:
        lo, hi = value.split(":")
        return int(lo), int(hi)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Rango inválido {value!r}, se espera FROM:TO") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extraer una tabla de una página pdf2xml (pdftohtml -xml) a CSV usando posiciones."
    )
    parser.add_argument("xml_path", type=str, help="Ruta al archivo de entrada pdf2xml")
    parser.add_argument("csv_path", type=str, help="Ruta al archivo de salida .csv")
    parser.add_argument("--page", type=int, default=1, help="Número de página (default: 1)")
    parser.add_argument("--from-top", type=int, required=True, help="Top mínimo (inclusivo) de la tabla")
    parser.add_argument("--to-top", type=int, required=True, help="Top máximo (inclusivo) de la tabla")

    cols = parser.add_mutually_exclusive_group(required=True)
    cols.add_argument("--ranges", type=_parse_range, nargs="+", metavar="FROM:TO",
                      help="Rangos de left por columna, en orden")
    cols.add_argument("--positions", type=int, nargs="+", metavar="LEFT",
                      help="Posición left representativa de cada columna (requiere --variance)")
    parser.add_argument("--variance", type=int, help="Ancho total de la ventana alrededor de cada posición")
    parser.add_argument("--columns", type=int, help="Número de columnas (default: uno por rango/posición)")

    parser.add_argument("--tolerance", type=int, default=0,
                        help="Diferencia de top permitida dentro de una fila (default: 0)")
    parser.add_argument("--header", type=str, nargs="+", help="Cabecera opcional del CSV")
    parser.add_argument("--skip-empty", action="store_true", help="Descarta filas sin celdas asignadas")
    parser.add_argument("--prefer-bold", action="store_true", help="Usa el texto en negrita cuando exista")
    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.positions and args.variance is None:
        parser.error("--variance es requerido junto con --positions")
    if args.ranges and args.variance is not None:
        parser.error("--variance solo aplica junto con --positions, no con --ranges")

    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")
    log.info("PDF2XML: %s", args.xml_path)
    log.info("CSV : %s", args.csv_path)

    header: Optional[List[str]] = args.header
    try:
        pdfxml_to_csv(
            args.xml_path,
            args.csv_path,
            page=args.page,
            from_top=args.from_top,
            to_top=args.to_top,
            ranges=args.ranges,
            positions=args.positions,
            variance=args.variance,
            columns=args.columns,
            allowed_height_variance=args.tolerance,
            header=header,
            skip_empty=args.skip_empty,
            prefer_bold=args.prefer_bold,
        )
    except TableConfigError as e:
        parser.error(str(e))
    except FileNotFoundError:
        log.error("Error: No se encontró el archivo de entrada: %s", args.xml_path)
        return 1
    except PdfXmlParseError as e:
        log.error("Error: %s", e)
        return 1
    except Exception as e:
        log.error("Ocurrió un error inesperado: %s", e, exc_info=True)
        return 1

    log.info("✔ Proceso completado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
