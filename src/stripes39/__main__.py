from .barcode import main


main()
