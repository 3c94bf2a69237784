import logging

from phylotext import TextTreeDescriber, caterpillar_tree, to_newick
from phylotext.logging_config import setup_logging


def main() -> None:
    setup_logging(logging.INFO)

    tree = caterpillar_tree(4)
    print(to_newick(tree))
    TextTreeDescriber(width=80, height=20, chars="line").describe(tree)


if __name__ == "__main__":
    main()
