# client.py

import argparse
from scrollback import Interface

def main():
    parser = argparse.ArgumentParser(description='Scrollback console')
    parser.add_argument('-e', '--endpoint',
        help='Remote session endpoint URL')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    parser.add_argument('--history',
        type=int,
        default=1024,
        help='Number of transcript lines kept for scrollback')
    
    args = parser.parse_args()
    
    console = Interface(
        endpoint=args.endpoint, 
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
        capacity=args.history
    )
    console.display.info("PageUp/PageDown scroll, Ctrl-L redraws, Ctrl-C quits")
    console.start()

if __name__ == "__main__":
    main()
