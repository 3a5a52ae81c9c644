### SECTION :: Version ###################################################################
VERSION = "20261018.1200"



### SECTION :: Module Imports ############################################################
# Standard
import argparse
import json
import os
import sys
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, TextIO

# Local
from uuid7time.utils import logger
from uuid7time.utils.constants import (APP_NAME, DEFAULT_FORMAT, ENV_LOG_LEVEL, ENV_SETTINGS_FILE, EXIT_FAILURE,
                                       EXIT_INTERRUPTED, EXIT_OK, LOG_PREFIX_APPLICATION, LOG_PREFIX_SYSTEM,
                                       LOG_PREFIX_USER, SETTINGS_FILE_PATH)
from uuid7time.utils.errors import InvalidFormat, NoInput, SettingsError, Uuid7TimeError
from uuid7time.utils.logger import format_log_data
from uuid7time.utils.time_format import OutputFormat, format_timestamp
from uuid7time.utils.uuid_decode import extract_timestamp_ms, parse_uuid



### SECTION :: Settings Layout ###########################################################
SETTINGS_SECTIONS = ('APPLICATION_SETTINGS', 'OUTPUT_SETTINGS')



### FUNCTION :: Load Config File #########################################################
def load_config(settings_file: Optional[str] = None) -> Dict[str, Any]:
    """Loads the optional JSON settings file. A missing file yields an empty config."""
    if settings_file is None:
        settings_file = os.environ.get(ENV_SETTINGS_FILE) or SETTINGS_FILE_PATH
    settings_path = os.path.abspath(os.path.expanduser(settings_file))

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            config = json.load(f)

    # Missing Settings File Means Defaults
    except FileNotFoundError:
        logger.debug(f"{LOG_PREFIX_APPLICATION} Settings File Not Found | {format_log_data({'app_conf_file': settings_path})}")
        return {}

    # Handle Invalid Json Format In Settings File
    except json.JSONDecodeError as e:
        raise SettingsError(settings_path, str(e)) from e

    # Handle Unreadable Settings File
    except OSError as e:
        raise SettingsError(settings_path, e.strerror or str(e)) from e

    if not isinstance(config, dict):
        raise SettingsError(settings_path, f"expected a JSON object, found {type(config).__name__}")

    for section in SETTINGS_SECTIONS:
        if config.get(section) is not None and not isinstance(config[section], dict):
            raise SettingsError(settings_path, f"{section} must be a JSON object")

    logger.debug(f"{LOG_PREFIX_APPLICATION} Settings File Load Successful | {format_log_data({'app_conf_file': settings_path, 'json_key_count': len(config)})}")
    return config



### FUNCTION :: Apply Settings ###########################################################
def apply_settings(config: Dict[str, Any]) -> str:
    """Configures logging from the settings and returns the default format name."""
    app_settings = config.get('APPLICATION_SETTINGS') or {}
    output_settings = config.get('OUTPUT_SETTINGS') or {}

    log_level_str = os.environ.get(ENV_LOG_LEVEL) or app_settings.get('LOG_LEVEL')
    if log_level_str:
        logger.set_log_level(str(log_level_str))

    log_file = app_settings.get('LOG_FILE')
    if log_file:
        log_path = os.path.expanduser(str(log_file))
        try:
            logger.add_file_handler(log_path)

        # Handle Unwritable Log File
        except OSError as e:
            raise SettingsError(log_path, e.strerror or str(e)) from e

    return str(output_settings.get('DEFAULT_FORMAT') or DEFAULT_FORMAT)



### CLASS :: Argument Parser #############################################################
class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with the tool's failure status."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")



### FUNCTION :: Build Argument Parser ####################################################
def build_parser() -> CliArgumentParser:
    parser = CliArgumentParser(
        prog=APP_NAME,
        description="Extract timestamps from UUID version 7",
    )
    parser.add_argument("uuids", nargs="*", metavar="UUID", help="UUID(s) to extract timestamp from")
    parser.add_argument("-f", "--format", metavar="FORMAT", default=None,
                        help="Output format: iso, unix, unix-ms, json (default: iso)")
    parser.add_argument("-u", "--unix", action="store_true",
                        help="Output unix timestamp in seconds (shortcut for --format unix)")
    parser.add_argument("-U", "--unix-ms", action="store_true",
                        help="Output unix timestamp in milliseconds (shortcut for --format unix-ms)")
    parser.add_argument("-j", "--json", action="store_true",
                        help="Output JSON format (shortcut for --format json)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress error messages")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser



### FUNCTION :: Parse Arguments ##########################################################
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses argv, rejecting a shorthand flag combined with an explicit --format."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.format is not None:
        shorthands = (("-u/--unix", args.unix), ("-U/--unix-ms", args.unix_ms), ("-j/--json", args.json))
        for flag, selected in shorthands:
            if selected:
                parser.error(f"argument {flag}: not allowed with argument -f/--format")

    return args



### FUNCTION :: Resolve Output Format ####################################################
def resolve_format(format_name: Optional[str], unix: bool = False, unix_ms: bool = False,
                   json_output: bool = False, default_name: str = DEFAULT_FORMAT) -> OutputFormat:
    """Picks the single output format.

    Precedence: --unix, --unix-ms, --json, --format, then default_name.
    Raises InvalidFormat for an unknown keyword.
    """
    if unix:
        return OutputFormat.UNIX
    if unix_ms:
        return OutputFormat.UNIX_MS
    if json_output:
        return OutputFormat.JSON
    if format_name is not None:
        return OutputFormat.from_name(format_name)
    return OutputFormat.from_name(default_name)



### FUNCTION :: Read Standard Input ######################################################
def read_lines(stream) -> List[str]:
    """Returns the trimmed non-blank lines of stream.

    Byte lines that are not valid UTF-8 are skipped. A read error ends
    collection with whatever was gathered so far.
    """
    lines: List[str] = []
    line_no = 0
    while True:
        try:
            raw = stream.readline()
        except OSError as e:
            log_data = {"line": line_no + 1, "exception_type": type(e).__name__, "details": str(e)}
            logger.debug(f"{LOG_PREFIX_USER} Input Read Stopped | {format_log_data(log_data)}")
            break
        if not raw:
            break
        line_no += 1

        if isinstance(raw, bytes):
            try:
                raw = raw.decode('utf-8')
            except UnicodeDecodeError as e:
                logger.debug(f"{LOG_PREFIX_USER} Input Line Skipped | {format_log_data({'line': line_no, 'details': str(e)})}")
                continue

        line = raw.strip()
        if line:
            lines.append(line)
    return lines



### FUNCTION :: Collect Inputs ###########################################################
def collect_inputs(uuids: Iterable[str], stream=None) -> List[str]:
    """Uses the positional UUIDs when given, otherwise reads them from stdin."""
    uuids = list(uuids)
    if uuids:
        return uuids
    if stream is None:
        stream = getattr(sys.stdin, 'buffer', sys.stdin)
    return read_lines(stream)



### FUNCTION :: Process Single UUID ######################################################
def process_uuid(uuid_str: str, output_format: OutputFormat) -> str:
    """Parses, extracts and formats one UUID string."""
    uuid_str = uuid_str.strip()
    uuid_obj = parse_uuid(uuid_str)
    timestamp_ms = extract_timestamp_ms(uuid_obj)
    logger.debug(f"{LOG_PREFIX_APPLICATION} UUID Decoded | {format_log_data({'uuid': uuid_str, 'uuid_version': uuid_obj.version, 'timestamp_ms': timestamp_ms})}")
    return format_timestamp(uuid_str, timestamp_ms, output_format)



### CLASS :: Batch Result ################################################################
class BatchResult(NamedTuple):
    processed: int
    failed: int

    @property
    def had_error(self) -> bool:
        return self.failed > 0

    @property
    def exit_code(self) -> int:
        if self.processed == 0 or self.had_error:
            return EXIT_FAILURE
        return EXIT_OK



### FUNCTION :: Run Batch ################################################################
def run_batch(inputs: List[str], output_format: OutputFormat, quiet: bool = False,
              out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> BatchResult:
    """Processes every input in order, printing each result as soon as it is ready.

    A failing item is reported on err (unless quiet) and never stops the batch.
    Raises NoInput when inputs is empty.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if not inputs:
        raise NoInput()

    processed = 0
    failed = 0
    for uuid_str in inputs:
        processed += 1
        try:
            output = process_uuid(uuid_str, output_format)

        # Handle Per-Item Failures
        except Uuid7TimeError as e:
            failed += 1
            log_data = {"input": uuid_str, "exception_type": type(e).__name__, "details": str(e)}
            logger.debug(f"{LOG_PREFIX_APPLICATION} UUID Failed | {format_log_data(log_data)}")
            if not quiet:
                print(f"Error: {e}", file=err)
            continue

        print(output, file=out)
        out.flush()

    return BatchResult(processed=processed, failed=failed)



### MAIN #################################################################################
def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        default_name = apply_settings(load_config())
    except SettingsError as e:
        log_data = {"app_conf_file": e.path, "details": e.details}
        logger.critical(f"{LOG_PREFIX_APPLICATION} Settings File Load Failed | {format_log_data(log_data)}")
        return EXIT_FAILURE

    try:
        output_format = resolve_format(args.format, args.unix, args.unix_ms, args.json, default_name)
    except InvalidFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    log_data = {"app_version": VERSION, "output_format": output_format.value, "arg_count": len(args.uuids)}
    logger.debug(f"{LOG_PREFIX_SYSTEM} Run Started | {format_log_data(log_data)}")

    try:
        inputs = collect_inputs(args.uuids)
        result = run_batch(inputs, output_format, quiet=args.quiet)

    # Handle Empty Input
    except NoInput as e:
        if not args.quiet:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # Handle User Interruption
    except KeyboardInterrupt:
        logger.warn(f"{LOG_PREFIX_USER} Keyboard Interrupt | {format_log_data({'reason': 'Interrupted before end of input'})}")
        return EXIT_INTERRUPTED

    # Handle Closed Output Pipe
    except BrokenPipeError:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return EXIT_FAILURE

    log_data = {"processed": result.processed, "failed": result.failed}
    logger.debug(f"{LOG_PREFIX_SYSTEM} Run Finished | {format_log_data(log_data)}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
