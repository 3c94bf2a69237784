from phylotext import TextTreeDescriber, parse_newick
from rich import print


def main() -> None:
    tree = parse_newick("(((Human:0.6,Chimp:0.7):1.2,Gorilla:2.1):1.5,(Mouse:3.4,Rat:3.1):0.9)Root;")

    describer = TextTreeDescriber(width=60, height=15, connector_style="[#0a7e89]")

    print("[bold cyan]Scaled by branch length:[/bold cyan]\n")
    for line in describer.lines(tree, include_markup=True):
        print(line)

    print("\n" + "=" * 40 + "\n")

    print("[bold green]Topology only:[/bold green]\n")
    for line in describer.lines(tree, topology_only=True, include_markup=True):
        print(line)


if __name__ == "__main__":
    main()
