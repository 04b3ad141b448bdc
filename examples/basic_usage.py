"""
Basic usage examples for env_schema package.

Fields are declared once; values come from the initial config, then
environment variables, then command-line options (highest priority).
"""
import logging
from env_schema import Schema, SchemaFieldRequiredError, process_argv, process_env


def build_schema() -> Schema:
    schema = Schema()
    schema.define("listen port", Schema.Required)       # LISTEN_PORT / --listen-port
    schema.define("include", Schema.Multi)               # INCLUDE / --include (repeatable)
    schema.define("dry_run", Schema.Flag)                # DRY_RUN / --dry-run
    schema.define("verbose", Schema.Flag, Schema.Multi)  # VERBOSE / --verbose, counted
    return schema


# =============================================================================
# Example 1: Precedence
# =============================================================================
def example1_precedence() -> None:
    schema = build_schema()
    env = {"LISTEN_PORT": "8000", "INCLUDE": "base"}
    argv = ["serve", "--listen-port=9000", "--include", "extra", "-v"]

    config = schema.read(env, argv, {"listen port": "80"})
    print(f"Example 1 - port: {config['listen port']}")   # 9000
    print(f"Example 1 - include: {config['include']}")    # ['base', 'extra']
    print(f"Example 1 - leftovers: {config['argv']}")     # ['serve', '-v']


# =============================================================================
# Example 2: Flags and counters
# =============================================================================
def example2_flags() -> None:
    schema = build_schema()
    config = schema.read({"DRY_RUN": ""}, ["--listen-port", "1", "--verbose", "--verbose"])
    print(f"Example 2 - dry_run: {config['dry_run']}")    # False (empty env var)
    print(f"Example 2 - verbose: {config['verbose']}")    # 2


# =============================================================================
# Example 3: Missing required field
# =============================================================================
def example3_missing_required() -> None:
    schema = build_schema()
    try:
        schema.read({}, [])
    except SchemaFieldRequiredError as e:
        print(f"Example 3 - set {e.env_name} or pass {e.opt_name} ({e.field_name})")


# =============================================================================
# Example 4: Reading the running process
# =============================================================================
def example4_process() -> None:
    schema = build_schema()
    try:
        config = schema.read(process_env(".env"), process_argv()[1:])
        print(f"Example 4 - resolved: {dict(config)}")
    except SchemaFieldRequiredError as e:
        print(f"Example 4 - {e}")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print("=== env_schema Examples ===\n")

    example1_precedence()
    example2_flags()
    example3_missing_required()
    example4_process()

    print("\n=== Examples Complete ===")


if __name__ == "__main__":
    main()
