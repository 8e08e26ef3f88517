# main.py
import subprocess
import os
import sys

def main():
    """Run the Streamlit app"""
    app_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "frontend", "app.py")
    try:
        subprocess.run(["streamlit", "run", app_path], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
