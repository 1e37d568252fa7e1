#!/usr/bin/env python3
"""
floodwatch 테스트 실행 스크립트

영역별(core, features, adapters, ...) 또는 전체 테스트를 실행합니다.
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

# 테스트 유형 → (pytest 대상, 설명)
TARGETS = {
    "all": ("tests/", "전체 테스트"),
    "unit": ("tests/unit/", "단위 테스트"),
    "integration": ("-m integration tests/", "통합 테스트"),
    "core": ("tests/unit/core/", "Core 모듈 테스트"),
    "common": ("tests/unit/common/", "Common 모듈 테스트"),
    "features": ("tests/unit/features/", "Features 모듈 테스트"),
    "adapters": ("tests/unit/adapters/", "Adapters 모듈 테스트"),
    "ports": ("tests/unit/ports/", "Ports 모듈 테스트"),
    "observability": ("tests/unit/observability/", "Observability 모듈 테스트"),
}


def run_command(cmd, description):
    """명령어 실행"""
    print(f"\n{'='*60}")
    print(f"실행 중: {description}")
    print(f"명령어: {cmd}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)

    if result.returncode != 0:
        print("실패")
        print(result.stdout)
        if result.stderr:
            print(result.stderr)
        return False

    print("성공")
    if result.stdout:
        print(result.stdout)
    return True


def main():
    parser = argparse.ArgumentParser(description="floodwatch 테스트 실행")
    parser.add_argument("--type", choices=sorted(TARGETS), default="all", help="실행할 테스트 유형")
    parser.add_argument("--coverage", action="store_true", help="코드 커버리지 포함")
    parser.add_argument("--verbose", action="store_true", help="상세 출력")
    args = parser.parse_args()

    os.chdir(Path(__file__).parent)

    pytest_opts = []
    if args.verbose:
        pytest_opts.append("-v")
    if args.coverage:
        pytest_opts.extend(["--cov=floodwatch", "--cov-report=term"])

    target, description = TARGETS[args.type]
    cmd = f"{sys.executable} -m pytest {' '.join(pytest_opts)} {target}"
    success = run_command(cmd, f"{description} 실행")

    print(f"\n{'='*60}")
    if not success:
        print("일부 테스트가 실패했습니다.")
        sys.exit(1)
    print("모든 테스트가 성공적으로 완료되었습니다!")
    print(f"{'='*60}")


if __name__ == "__main__":
    main()
