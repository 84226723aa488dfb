#setup: pip install -e ".[test]"
#setup: python -m growthsim   (or: flask --app "growthsim.app:create_app()" run --debug)

from growthsim.app import create_app

if __name__ == "__main__":
    app = create_app()
    app.run(port=app.config["SETTINGS"].port, debug=app.config["SETTINGS"].env == "dev")
