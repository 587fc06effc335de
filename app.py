from lateness_tracker.main import create_app, run

app = create_app()

if __name__ == "__main__":
    run()
