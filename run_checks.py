import subprocess
import sys

def run_command(command, output_file):
    print(f"Running: {' '.join(command)}")
    try:
        with open(output_file, "w") as f:
            result = subprocess.run(
                command,
                stdout=f,
                stderr=subprocess.STDOUT,
                text=True
            )
        print(f"Finished: {' '.join(command)} (Exit Code: {result.returncode})")
        return result.returncode
    except OSError as e:
        print(f"Error running {' '.join(command)}: {e}")
        return 1

def main():
    print("Starting srtp-auth checks...")

    # 'uv run' keeps every step inside the project's environment
    commands = [
        (["uv", "run", "ruff", "check", "."], "ruff_output.txt"),
        (["uv", "run", "mypy", "src/srtp_auth"], "mypy_output.txt"),
        (["uv", "run", "pytest", "-v"], "test_output.txt"),
        (["uv", "run", "srtp-auth-driver", "validate"], "self_test_output.txt"),
    ]

    failed = [cmd for cmd, out in commands if run_command(cmd, out) != 0]

    print("\nChecks completed.")
    if failed:
        print(f"{len(failed)} check(s) failed. Please review the output files.")
        sys.exit(1)
    print("All checks passed!")
    sys.exit(0)

if __name__ == "__main__":
    main()
