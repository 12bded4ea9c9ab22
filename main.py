"""
Agent Conversation Demos
Main entry point for running the writer/critic demos.

Usage:
    python main.py --argumentary         # Writer/critic argumentary cheat sheet
    python main.py --multi-critic        # Article with nested multi-critic review
    python main.py --all                 # Run both demos one after the other
    python main.py --check-keys          # Report API key configuration
"""

import argparse
import asyncio
import sys
import time
from typing import List, Optional

from config.config import API_KEY_ENV_VARS, SYSTEM_CONFIG, validate_api_keys
from src.llm_clients import CLIENT_CLASSES, create_client
from src.models.schemas import WorkflowResult
from src.workflows import WORKFLOWS


def check_api_keys(provider: Optional[str] = None) -> bool:
    """
    Check and report API key status.

    Args:
        provider: Provider that must be configured; None means all of them

    Returns:
        True when the required key(s) are present
    """
    print("\n" + "=" * 60)
    print("API Key Status")
    print("=" * 60)

    status = validate_api_keys()

    for name, configured in status.items():
        status_str = "[OK] Configured" if configured else "[X] Missing"
        print(f"  {name.upper()}: {status_str}")

    if provider is not None:
        ready = status.get(provider.lower(), False)
    else:
        ready = all(status.values())

    if not ready:
        missing = [provider.lower()] if provider else [n for n, ok in status.items() if not ok]
        print("\nWarning: Some API keys are missing.")
        print("Create a .env file with your API keys:")
        for name in missing:
            print(f"  {API_KEY_ENV_VARS[name]}=your_key")

    return ready


async def test_api_connections(test_message: str, temperature: float = 0.5):
    """
    Test API connections by sending a test message to each provider.

    Args:
        test_message: Message to send to each provider
        temperature: Temperature setting for generation
    """
    print("\n" + "=" * 60)
    print("API Connection Test")
    print("=" * 60)
    print(f"Test message: \"{test_message}\"")
    print(f"Temperature: {temperature}")
    print("-" * 60)

    results = {}

    for provider in CLIENT_CLASSES:
        print(f"\n  Testing {provider}...", end=" ", flush=True)

        try:
            client = create_client(provider)
        except ValueError as e:
            # API key not configured
            print("[SKIP] API key not configured")
            results[provider] = {"status": "skipped", "error": str(e)}
            continue

        try:
            start_time = time.time()
            response = await client.generate(
                prompt=test_message,
                temperature=temperature,
                max_tokens=100
            )
            elapsed = time.time() - start_time

            print(f"[OK] ({elapsed:.2f}s)")
            print(f"    Response: {response[:100]}{'...' if len(response) > 100 else ''}")
            results[provider] = {"status": "success", "time": elapsed, "response": response}

        except Exception as e:
            # Connection or API error
            print("[FAIL]")
            print(f"    Error: {str(e)}")
            results[provider] = {"status": "failed", "error": str(e)}

    print("\n" + "-" * 60)
    print("Summary:")
    success_count = sum(1 for r in results.values() if r["status"] == "success")
    skip_count = sum(1 for r in results.values() if r["status"] == "skipped")
    fail_count = sum(1 for r in results.values() if r["status"] == "failed")

    print(f"  Successful: {success_count}")
    print(f"  Skipped (no API key): {skip_count}")
    print(f"  Failed: {fail_count}")

    if fail_count > 0:
        print("\n[WARNING] Some API connections failed. Check your API keys and network.")
    elif success_count == 0:
        print("\n[WARNING] No API connections tested. Configure at least one API key.")

    return results


async def run_demos(
    demos: List[str],
    provider: str,
    model_id: Optional[str] = None,
    max_rounds: Optional[int] = None,
    output_dir: Optional[str] = None,
    verbose: bool = True
) -> List[WorkflowResult]:
    """
    Run the selected demos one after the other.

    Args:
        demos: Demo keys, in run order
        provider: Provider for every agent
        model_id: Model override
        max_rounds: Round cap override for every demo
        output_dir: Directory for the final drafts
        verbose: Whether to print the conversation

    Returns:
        One WorkflowResult per demo
    """
    client = create_client(provider, model_id)
    results = []

    for demo in demos:
        print("\n" + "#" * 60)
        print(f"DEMO: {demo}")
        print("#" * 60)

        kwargs = {"output_dir": output_dir, "verbose": verbose}
        if max_rounds is not None:
            kwargs["max_rounds"] = max_rounds

        workflow = WORKFLOWS[demo](client, **kwargs)

        result = await workflow.run()
        results.append(result)

        conversation = result.conversation
        print(f"\n{'=' * 60}")
        print(f"{demo.upper()} COMPLETE")
        print(f"  Rounds: {conversation.rounds}")
        print(f"  Messages: {conversation.message_counts()}")
        print(f"  Terminated by {SYSTEM_CONFIG.termination_token}: {conversation.terminated}")
        print(f"  Output: {result.output_path or 'not written'}")
        print(f"{'=' * 60}")

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Agent Conversation Demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py --all                         # Run both demos
    python main.py --argumentary                 # Argumentary cheat sheet only
    python main.py --multi-critic --max-rounds 3 # Shorter article review
    python main.py --provider anthropic --all    # Use Claude for every agent
    python main.py --check-keys                  # Check API key configuration
    python main.py --check-keys --test-message "Hello" --temperature 0.7  # Test API connections
        """
    )

    parser.add_argument('--all', action='store_true',
                        help='Run both demos')
    parser.add_argument('--argumentary', action='store_true',
                        help='Run the writer/critic argumentary demo')
    parser.add_argument('--multi-critic', action='store_true',
                        help='Run the article demo with nested multi-critic review')
    parser.add_argument('--check-keys', action='store_true',
                        help='Check API key configuration')
    parser.add_argument('--test-message', type=str, default=None,
                        help='Test message to send to each provider (use with --check-keys)')
    parser.add_argument('--temperature', type=float, default=0.5,
                        help='Temperature for the test message (default: 0.5)')
    parser.add_argument('--provider', type=str, default=SYSTEM_CONFIG.provider,
                        choices=sorted(CLIENT_CLASSES),
                        help=f'Provider for every agent (default: {SYSTEM_CONFIG.provider})')
    parser.add_argument('--model', type=str, default=None,
                        help='Model to use instead of the provider default')
    parser.add_argument('--max-rounds', type=int, default=None,
                        help='Round cap for the conversations (default: per demo)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help=f'Directory for the final drafts (default: {SYSTEM_CONFIG.output_dir})')
    parser.add_argument('--quiet', action='store_true',
                        help='Do not print the conversation')
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.check_keys:
        check_api_keys()
        if args.test_message:
            asyncio.run(test_api_connections(args.test_message, args.temperature))
        return

    if args.max_rounds is not None and args.max_rounds < 1:
        parser.error("--max-rounds must be at least 1")

    # Default to both demos if no specific one is selected
    if not any([args.all, args.argumentary, args.multi_critic]):
        args.all = True

    demos = []
    if args.all or args.argumentary:
        demos.append("argumentary")
    if args.all or args.multi_critic:
        demos.append("multi_critic")

    if not check_api_keys(args.provider):
        print(f"\nPlease configure the {args.provider} API key before running the demos.")
        sys.exit(1)

    asyncio.run(run_demos(
        demos=demos,
        provider=args.provider,
        model_id=args.model,
        max_rounds=args.max_rounds,
        output_dir=args.output_dir,
        verbose=not args.quiet
    ))


if __name__ == "__main__":
    main()
