from . import copy_all_text, print_results, translate

DEMO = r"""
\\P:A/P:B/S:AB/R:3;AB=ABC/[ABC]?/
P:D.BC|BD=2/ABC*EQ?/AB;AC*PR?/
\p:<ABC=60/_LC/\q\\
"""


def run():
    results = translate(DEMO)
    print(f"Translated {len(results)} statement(s):\n")
    print(print_results(results))
    print(f"Copy-all text:\n{copy_all_text(results)}")


if __name__ == "__main__":
    run()
