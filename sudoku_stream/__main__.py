from .cli import run_solve

if __name__ == "__main__":
    run_solve()
