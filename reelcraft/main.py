import argparse
import shutil
import sys
from typing import Any

from reelcraft.ai.prompt_enhancement import PromptEnhancement
from reelcraft.ai.video_generation import (
    PRESETS,
    AspectRatio,
    GenerationMode,
    GenerationResult,
    Resolution,
    VeoModel,
    VideoGeneration,
    get_preset,
    parse_parameters,
)
from reelcraft.content.image import ImageData
from reelcraft.content.video import VideoData
from reelcraft.core import Manifest, configure_logging
from reelcraft.core.exceptions import BaseError


def generate(
    args: argparse.Namespace, manifest: Manifest
) -> GenerationResult:
    """
    reelcraft Generate
    """
    params = _build_params(args)
    if args.enhance:
        params.prompt = enhance(params.prompt, manifest)
    video_generation = VideoGeneration(
        __unpack__=True,
        __provider__=manifest.video_generation.to_binding(),
    )
    video_generation.validate(params)
    result = video_generation.generate(params)
    if args.out:
        shutil.move(result.path, args.out)
        result = result.copy(update={"path": args.out})
    return result


def enhance(prompt: str, manifest: Manifest) -> str:
    """
    reelcraft Enhance
    """
    prompt_enhancement = PromptEnhancement(
        __unpack__=True,
        __provider__=manifest.prompt_enhancement.to_binding(),
    )
    return prompt_enhancement.enhance(prompt)


def _build_params(args: argparse.Namespace):
    obj: dict[str, Any] = {}
    if args.preset:
        obj = get_preset(args.preset).to_dict()
    obj["mode"] = args.mode or obj.get("mode", GenerationMode.TEXT_TO_VIDEO)
    for key in ("prompt", "model", "aspect_ratio", "resolution"):
        value = getattr(args, key)
        if value is not None:
            obj[key] = value
    if args.start_frame:
        obj["start_frame"] = ImageData.load(args.start_frame)
    if args.end_frame:
        obj["end_frame"] = ImageData.load(args.end_frame)
    if args.loop:
        obj["is_looping"] = True
    if args.reference:
        obj["reference_images"] = [ImageData.load(r) for r in args.reference]
    if args.style:
        obj["style_image"] = ImageData.load(args.style)
    if args.input_video:
        obj["input_video"] = VideoData.load(args.input_video)
    if args.video_uri:
        obj["video_reference"] = {"uri": args.video_uri}
    return parse_parameters(obj)


def _print_result(result: GenerationResult) -> None:
    print(f"Video: {result.path} ({result.size} bytes)")
    print(f"Reference: {result.reference.uri}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="reelcraft", description="reelcraft CLI"
    )
    parser.add_argument("--config", type=str, default=None, help="Manifest")
    subparsers = parser.add_subparsers(dest="command", required=True)
    generate_parser = subparsers.add_parser("generate", help="Generate video")
    enhance_parser = subparsers.add_parser("enhance", help="Enhance prompt")
    subparsers.add_parser("presets", help="List presets")
    generate_parser_arguments = [
        ("--prompt", str, None, "Text prompt", None),
        (
            "--mode",
            str,
            None,
            "Generation mode",
            [m.value for m in GenerationMode],
        ),
        ("--model", str, None, "Model", [m.value for m in VeoModel]),
        (
            "--aspect-ratio",
            str,
            None,
            "Aspect ratio",
            [a.value for a in AspectRatio],
        ),
        (
            "--resolution",
            str,
            None,
            "Resolution",
            [r.value for r in Resolution],
        ),
        ("--preset", str, None, "Start from a preset", None),
        ("--start-frame", str, None, "Start frame image", None),
        ("--end-frame", str, None, "End frame image", None),
        ("--reference", str, None, "Reference image (up to 3)", None),
        ("--style", str, None, "Style image", None),
        ("--input-video", str, None, "Video file to extend", None),
        ("--video-uri", str, None, "Reference of the video to extend", None),
        ("--out", str, None, "Output path", None),
    ]
    for arg in generate_parser_arguments:
        generate_parser.add_argument(
            arg[0],
            type=arg[1],
            default=arg[2],
            help=arg[3],
            choices=arg[4],
            action="append" if arg[0] == "--reference" else "store",
        )
    generate_parser.add_argument(
        "--loop", action="store_true", help="Loop back to the start frame"
    )
    generate_parser.add_argument(
        "--enhance", action="store_true", help="Enhance the prompt first"
    )
    enhance_parser.add_argument("prompt", type=str, help="Prompt to enhance")

    args = parser.parse_args(argv)
    try:
        manifest = Manifest.load(args.config)
        configure_logging(manifest.log_level)
        if args.command == "generate":
            _print_result(generate(args, manifest))
        elif args.command == "enhance":
            print(enhance(args.prompt, manifest))
        elif args.command == "presets":
            for preset in PRESETS:
                print(f"{preset.id}: {preset.title} - {preset.description}")
        else:
            parser.print_help()
    except BaseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
