"""
Command-Line Interface for piccy-tts.

Generates speech without running the HTTP server, using the same
validation and PiccyBot client as GET /tts. Can also start the server.

Usage Examples:
    # Single text
    piccy-tts --voice nova --text "Hello there" --out hello.mp3

    # Positional text (voice defaults to alloy)
    piccy-tts "Hello there"

    # Show the upstream payload without calling PiccyBot
    piccy-tts --voice echo --text "Test" --dry-run --json

    # List voices
    piccy-tts --voices

    # Run the HTTP API
    piccy-tts --serve --host 127.0.0.1 --port 8080

Exit codes:
    0  success
    1  validation or upstream failure (message printed to stderr)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from piccy_tts.core.config import ConfigValidationError, load_settings_or_defaults
from piccy_tts.core.logging import configure_logging, get_logger, info, set_request_id
from piccy_tts.services.errors import ProxyError
from piccy_tts.services.speech_service import SpeechService


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="piccy-tts CLI (PiccyBot text-to-speech)")

    parser.add_argument("text_pos", nargs="?", help="Text to synthesize (positional)")
    parser.add_argument("--text", help="Text to synthesize")
    parser.add_argument("--voice", default="alloy", help="Voice (default: alloy)")
    parser.add_argument("--out", help="Output path (default: tts_<voice>.mp3)")
    parser.add_argument("--settings", help="Path to settings.yaml")

    parser.add_argument("--voices", action="store_true", help="List available voices")
    parser.add_argument("--dry-run", action="store_true",
                        help="Validate and print the upstream payload without calling it")
    parser.add_argument("--json", action="store_true", help="Print JSON summary")

    parser.add_argument("--serve", action="store_true", help="Run the HTTP API with uvicorn")
    parser.add_argument("--host", help="Bind host for --serve")
    parser.add_argument("--port", type=int, help="Bind port for --serve")

    return parser.parse_args(argv)


def _emit(payload: dict, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for key, value in payload.items():
            print(f"{key}: {value}")


def _serve(args: argparse.Namespace, host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("piccy_tts.main:app", host=args.host or host, port=args.port or port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for validation/upstream errors).
    """
    args = _parse_args(argv)

    # Logging reads its section from the same --settings file
    configure_logging(force=args.settings is not None, settings_path=args.settings)
    log = get_logger("piccy-tts.cli")
    set_request_id(str(uuid4())[:12])

    settings = load_settings_or_defaults(args.settings)
    try:
        config = settings.get_proxy_config()
    except ConfigValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.serve:
        return _serve(args, settings.server_host, settings.server_port)

    service = SpeechService(config)

    if args.voices:
        _emit({"voices": list(service.voices), "total": len(service.voices)}, args.json)
        return 0

    try:
        params = service.validate(args.voice, args.text or args.text_pos)
    except ProxyError as e:
        print(e.message, file=sys.stderr)
        return 1

    if args.dry_run:
        payload = {
            "ok": True,
            "dry_run": True,
            "url": config.upstream.url,
            "payload": service.preview_payload(params),
        }
        _emit(payload, args.json)
        print("DRY_RUN_OK")
        return 0

    try:
        result = asyncio.run(service.synthesize(params))
    except ProxyError as e:
        print(f"Generation failed: {e.message}", file=sys.stderr)
        return 1

    out_path = Path(args.out or result.filename)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(result.audio)
    info(log, "cli_saved", out=str(out_path), bytes=len(result.audio))

    _emit({"ok": True, "out": str(out_path), "voice": result.voice, "bytes": len(result.audio)}, args.json)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
