import os
import sys
import time
from datetime import datetime

import pandas as pd

from checker import cross_check_with_galois, failed_checks, print_report, verify_plane
from dataset import export_dataset
from dot_writer import write_dot
from geometry import build_projective_plane, validate_order

RESULTS_CSV = "plane_results.csv"

USAGE = "Usage: python main.py [--check] [--no-color] [--export <dir>] [<order> [<filename>]]"


def parse_order(raw):
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"The entered order '{raw.strip()}' is not a number.")


def prompt_order():
    return parse_order(input("Enter the order of your desired projective plane (a prime): \n"))


def prompt_filename():
    return input("Enter the filename where the graph representation should be saved: \n").strip()


def save_run_results(filename: str, order: int, num_points: int, num_lines: int, build_time: float, check_status: str) -> str:
    """실행 결과 한 줄을 출력 파일 옆의 CSV에 누적 기록함."""
    results_csv_path = os.path.join(os.path.dirname(os.path.abspath(filename)), RESULTS_CSV)
    result_log = {
        "timestamp": datetime.now().isoformat(),
        "order": order,
        "points": num_points,
        "lines": num_lines,
        "build_time_s": round(build_time, 4),
        "check": check_status,
        "output": os.path.basename(filename),
    }
    df_new = pd.DataFrame([result_log])
    if os.path.exists(results_csv_path):
        df_new.to_csv(results_csv_path, mode="a", header=False, index=False)
    else:
        df_new.to_csv(results_csv_path, mode="w", header=True, index=False)
    return results_csv_path


def run(order: int, filename: str = None, check: bool = False, export_dir: str = None, colored: bool = True) -> int:
    try:
        validate_order(order)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    # 파일 이름은 order 검사가 끝난 뒤에 물어봄
    if not filename:
        filename = prompt_filename()

    print(f"\n[1] Building PG(2, {order})...")
    start = time.time()
    result = build_projective_plane(order)
    build_time = time.time() - start
    print(f"  > {result.num_points} points, {result.num_lines} lines in {build_time:.4f}s.")

    check_status = "SKIPPED"
    if check:
        print("\n[2] Verifying incidence axioms...")
        report = verify_plane(result)
        report["Galois_Cross_Check"] = "PASS" if cross_check_with_galois(result) else "FAIL"
        print_report(report)
        failed = failed_checks(report)
        check_status = "FAIL" if failed else "PASS"
        if failed:
            print(f"Verification failed: {', '.join(failed)}", file=sys.stderr)
            return 1

    try:
        write_dot(result, filename, colored=colored)
    except OSError as e:
        print(f"Some error happened. Couldn't open the file for writing. ({e})", file=sys.stderr)
        return 2

    if export_dir is not None:
        try:
            export_dataset(result, export_dir)
        except OSError as e:
            print(f"Couldn't export the dataset to '{export_dir}'. ({e})", file=sys.stderr)
            return 2

    try:
        log_path = save_run_results(filename, order, result.num_points, result.num_lines, build_time, check_status)
        print(f"  > [Logged] Results saved to '{log_path}'")
    except OSError as e:
        print(f"  > [Log Error] Failed to write results: {e}", file=sys.stderr)

    print(f"Graph was created and saved in file {filename}.")
    return 0


def parse_args(argv):
    args = list(argv)
    options = {"check": False, "colored": True, "export_dir": None}

    if "--check" in args:
        options["check"] = True
        args.remove("--check")
    if "--no-color" in args:
        options["colored"] = False
        args.remove("--no-color")
    if "--export" in args:
        pos = args.index("--export")
        if pos + 1 >= len(args):
            raise ValueError("--export needs a directory.")
        options["export_dir"] = args[pos + 1]
        del args[pos:pos + 2]

    if len(args) > 2 or any(a.startswith("--") for a in args):
        raise ValueError(USAGE)

    options["order"] = parse_order(args[0]) if args else None
    options["filename"] = args[1] if len(args) > 1 else None
    return options


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
        order = options["order"] if options["order"] is not None else prompt_order()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return run(order, options["filename"], check=options["check"], export_dir=options["export_dir"], colored=options["colored"])


if __name__ == "__main__":
    sys.exit(main())
