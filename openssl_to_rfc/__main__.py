import sys
from typing import List, Optional, TextIO

from openssl_to_rfc.__version__ import __version__
from openssl_to_rfc.cli.command_line_parser import CommandLineParser, CommandLineParsingError
from openssl_to_rfc.cli.console_output import ConsoleOutputGenerator, look_up_cipher_suite
from openssl_to_rfc.json.json_output import (
    CipherSuiteAsJson,
    CipherSuiteLookupAsJson,
    CipherSuiteLookupOutputAsJson,
)
from openssl_to_rfc.repository import CipherSuitesRepository


def main(args: Optional[List[str]] = None) -> None:
    # Parse the supplied command line
    command_line_parser = CommandLineParser(__version__)
    try:
        parsed_command_line = command_line_parser.parse_command_line(args)
    except CommandLineParsingError as e:
        print(e.get_error_msg())
        sys.exit(2)

    registry = CipherSuitesRepository.get_registry(parsed_command_line.protocol)
    lookup_results = [look_up_cipher_suite(registry, name) for name in parsed_command_line.cipher_suite_names]
    all_cipher_suites = registry.get_all_cipher_suites() if parsed_command_line.should_list_all_cipher_suites else None

    # Print the results to the console, unless the console is used for the JSON output
    console_output: Optional[ConsoleOutputGenerator] = None
    if not parsed_command_line.should_print_json_to_console:
        console_output = ConsoleOutputGenerator(file_to=sys.stdout)
        if all_cipher_suites is not None:
            console_output.all_cipher_suites_listed(parsed_command_line.protocol, all_cipher_suites)
        console_output.lookups_completed(parsed_command_line.protocol, lookup_results)

    # Write results to a JSON file if needed
    json_file_out: Optional[TextIO] = None
    if parsed_command_line.should_print_json_to_console:
        json_file_out = sys.stdout
    elif parsed_command_line.json_path_out:
        json_file_out = parsed_command_line.json_path_out.open("wt", encoding="utf-8")

    if json_file_out:
        json_output = CipherSuiteLookupOutputAsJson(
            lookups=[CipherSuiteLookupAsJson.model_validate(lookup_result) for lookup_result in lookup_results],
            all_cipher_suites=(
                [CipherSuiteAsJson.model_validate(cipher_suite) for cipher_suite in all_cipher_suites]
                if all_cipher_suites is not None
                else None
            ),
        )
        json_file_out.write(json_output.model_dump_json(indent=4))
        if json_file_out is not sys.stdout:
            json_file_out.close()
            if console_output and parsed_command_line.json_path_out:
                console_output.json_output_written(parsed_command_line.json_path_out)

    # Return a non-zero error code if some names could not be translated, so scripts can detect it
    if any(lookup_result.cipher_suite is None for lookup_result in lookup_results):
        sys.exit(1)


if __name__ == "__main__":
    main()
