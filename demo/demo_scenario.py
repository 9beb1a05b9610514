#!/usr/bin/env python3
"""
Demo scenario for the course management system.
"""

import io
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ucms.main import CourseManagementSystem


SCENARIOS = [
    ("Student at maximum enrollment", "enroll\n1\n4\n"),
    ("Enroll and drop", "enroll\n2\n3\ndrop\n2\n3\n"),
    ("Enroll twice", "enroll\n3\n1\nenroll\n3\n1\n"),
    ("Duplicate course", "course\nalgorithms\nmaster\n"),
    ("Reserved name", "student\ncourse\n"),
    ("Professor at full load", "teach\n4\n3\n"),
    ("New professor", "professor\nBob\n"),
    ("Exempt twice", "exempt\n6\n6\nexempt\n6\n6\n"),
]


def run_scenario(title, commands):
    """Run one command script against a freshly seeded system."""
    output = io.StringIO()
    system = CourseManagementSystem(output=output)
    status = system.run(io.StringIO(commands))

    print(f"\n--- {title} ---")
    for line in commands.splitlines():
        print(f"  > {line}")
    for line in output.getvalue().splitlines():
        print(f"  {line}")
    print(f"  exit status: {status}")
    return system


def show_statistics(system):
    print("\nRegistry statistics:")
    for key, value in system.registry.get_statistics().items():
        print(f"  {key}: {value}")


def run_demo():
    """Run every scenario and print the final state of the last one."""
    print("=" * 60)
    print("UNIVERSITY COURSE MANAGEMENT SYSTEM - DEMO")
    print("=" * 60)

    system = None
    for title, commands in SCENARIOS:
        system = run_scenario(title, commands)

    show_statistics(system)

    print("\n" + "=" * 60)
    print("DEMO COMPLETED")
    print("=" * 60)


if __name__ == "__main__":
    run_demo()
