"""CLI utility functions for user interaction."""
import sys


def read_tool_request(prompt: str = "🛠️  Describe the tool you need: ") -> str:
    """Read a tool request from user input via stdin."""
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line:  # EOF
        raise KeyboardInterrupt

    request = line.strip()
    if request.lower() in {"bye", "quit", "exit", "q"}:
        raise KeyboardInterrupt

    return request


def print_tool(tool) -> None:
    """Print a generated tool and its LangChain module to stdout."""
    print(f"✅ **{tool.name}** (`{tool.slug}`)")
    print(f"   {tool.description}")
    print()
    print(tool.langchain_code)
