from cli.main import digestkit_cli


if __name__ == '__main__':
    digestkit_cli()
