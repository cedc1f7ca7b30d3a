from android_gradle_props.cli import cli

if __name__ == "__main__":
    cli()
