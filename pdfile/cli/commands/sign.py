"""CLI helpers for adding a signature image."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...config import PdfileConfig
from ...core.validator import PDF_EXTENSIONS
from ...tools.common.interfaces import ToolContext
from ...tools.stamp.signature import SIGNATURE_EXTENSIONS, SignatureOptions
from .common import add_output_option, add_yes_option, input_file, output_file, page_option


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("sign", help="Add a PNG signature to a PDF")
    parser.add_argument("pdf", help="Input PDF file")
    parser.add_argument("signature", help="Signature image (PNG)")
    add_output_option(parser)
    parser.add_argument("--x", type=float, help="X position in points from the left")
    parser.add_argument("--y", type=float, help="Y position in points from the bottom")
    parser.add_argument("-w", "--width", type=float, help="Signature width in points")
    parser.add_argument("-H", "--height", type=float, help="Signature height in points")
    parser.add_argument("--opacity", type=float, default=1.0, help="Opacity from 0 to 1")
    parser.add_argument("-p", "--pages", help="Pages to sign, e.g. 1,3 (default: last page)")
    parser.add_argument(
        "--no-remove-bg",
        dest="remove_bg",
        action="store_false",
        help="Keep the signature's white background",
    )
    parser.add_argument("--fuzz", type=float, default=15, help="Background colour tolerance (%%)")
    parser.add_argument("--feather", type=float, default=20, help="Edge softening from 0 to 100")
    add_yes_option(parser)
    parser.set_defaults(tool_name="sign", build_context=_build_context)


def _build_context(args, settings: PdfileConfig) -> ToolContext:
    pdf_path = input_file(args.pdf, PDF_EXTENSIONS)
    signature = input_file(args.signature, SIGNATURE_EXTENSIONS, label="Signature")
    options = SignatureOptions(
        signature_file=signature,
        x=args.x,
        y=args.y,
        width=args.width,
        height=args.height,
        opacity=args.opacity,
        pages=page_option(args.pages),
        remove_bg=args.remove_bg,
        fuzz=args.fuzz,
        feather=args.feather,
    )
    return ToolContext(
        input_path=pdf_path,
        output_path=output_file(args.output),
        settings=settings,
        config={"options": options},
    )
